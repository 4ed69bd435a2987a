"""
Open the single connection a run executes its batch on.

URL parsing, driver connect, ping and the session statement timeout all
happen here, so a DBConnectionError is raised before any statement runs.
"""

import logging
from typing import Any

from sqlrunner.core.config import settings
from sqlrunner.core.errors import DBConnectionError

from .connection import apply_statement_timeout, connect, parse_database_url, redact_url
from .health import health_check

_log = logging.getLogger(__name__)


def open_connection(
    url: str | None,
    *,
    connect_timeout: int | None = None,
    statement_timeout: float | None = None,
) -> Any:
    """
    Connect to the database at *url* and verify the connection with a ping.

    Timeouts default to settings.CONNECT_TIMEOUT / settings.STATEMENT_TIMEOUT.
    """
    if not url:
        raise DBConnectionError(
            "No database URL configured. Set SQLRUNNER_DATABASE_URL "
            "(or ORACLE_CONNECTION_STRING) or pass --database-url."
        )
    safe_url = redact_url(url)
    datasource = parse_database_url(url)
    if connect_timeout is None:
        connect_timeout = settings.CONNECT_TIMEOUT
    if statement_timeout is None:
        statement_timeout = settings.STATEMENT_TIMEOUT

    _log.debug("Connecting to %s", safe_url)
    try:
        conn = connect(datasource, timeout=connect_timeout)
    except Exception as e:
        raise DBConnectionError(f"Database connection failed: {e}", url=safe_url) from e

    try:
        if not health_check(conn, datasource.product_type):
            raise DBConnectionError("Database ping failed", url=safe_url)
        apply_statement_timeout(conn, datasource.product_type, statement_timeout)
    except DBConnectionError:
        close_quiet(conn)
        raise
    except Exception as e:
        close_quiet(conn)
        raise DBConnectionError(
            f"Setting statement timeout failed: {e}", url=safe_url
        ) from e

    _log.info("Connected to %s", safe_url)
    return conn


def close_quiet(conn: Any) -> None:
    try:
        conn.close()
    except Exception:
        _log.debug("Error closing connection", exc_info=True)
