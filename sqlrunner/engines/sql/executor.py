"""
Execute one statement on an open connection and materialize its result.

Every row is read before returning, and every value is turned into text so
output writers never see driver types. SQL NULL stays ``None``.
"""

import sqlite3
from datetime import date, datetime, time
from typing import Any

import oracledb
import psycopg
import pymysql
from trino import exceptions as trino_errors

from sqlrunner.core.db import cursor_to_rows, execute
from sqlrunner.core.errors import QueryError
from sqlrunner.models import ResultSet

_DRIVER_ERRORS: tuple[type[Exception], ...] = (
    oracledb.Error,
    psycopg.Error,
    pymysql.Error,
    trino_errors.Error,
    trino_errors.TrinoQueryError,
    trino_errors.HttpError,
    sqlite3.Error,
)


def to_text(value: Any) -> str | None:
    """Render a driver value as text; None (SQL NULL) is kept as None."""
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, oracledb.LOB):
        return to_text(value.read())
    return str(value)


def execute_statement(conn: Any, sql: str, index: int = 1) -> ResultSet:
    """
    Run *sql* and return its columns and all rows as text.

    Statements without a result set (DDL/DML) return an empty ResultSet
    carrying the driver rowcount. Driver errors become QueryError.
    """
    cur = None
    try:
        cur = execute(conn, sql)
        columns, rows = cursor_to_rows(cur)
        rowcount = cur.rowcount if cur.rowcount is not None else -1
    except _DRIVER_ERRORS as e:
        raise QueryError(sql, index, str(e).strip() or type(e).__name__) from e
    finally:
        if cur is not None:
            try:
                cur.close()
            except Exception:
                pass

    return ResultSet(
        columns=[str(c) for c in columns],
        rows=[tuple(to_text(v) for v in row) for row in rows],
        rowcount=rowcount,
    )
