"""
DB connection helpers: URL parsing, driver connect, ping, cursor reading.

No driver layer: oracledb, psycopg, pymysql and trino are installed via pip;
a DataSource (product_type, host, ...) is enough.
"""

from .connection import (
    apply_statement_timeout,
    connect,
    cursor_to_rows,
    execute,
    parse_database_url,
    redact_url,
)
from .health import health_check
from .session import close_quiet, open_connection

__all__ = [
    "apply_statement_timeout",
    "close_quiet",
    "connect",
    "cursor_to_rows",
    "execute",
    "health_check",
    "open_connection",
    "parse_database_url",
    "redact_url",
]
