"""Unit tests for engines.sql.executor."""

import sqlite3
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock, patch

import psycopg
import pytest
from trino.exceptions import TrinoConnectionError, TrinoInternalError

from sqlrunner.core.errors import QueryError
from sqlrunner.engines.sql import execute_statement
from sqlrunner.engines.sql.executor import to_text


class TestToText:
    def test_null_kept(self) -> None:
        assert to_text(None) is None

    def test_scalars(self) -> None:
        assert to_text(1) == "1"
        assert to_text(Decimal("1.50")) == "1.50"
        assert to_text("x") == "x"

    def test_bytes(self) -> None:
        assert to_text(b"abc") == "abc"
        assert to_text(b"\xff") == "�"

    def test_dates(self) -> None:
        assert to_text(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04:05"
        assert to_text(date(2024, 1, 2)) == "2024-01-02"


def test_select_materializes_text(sqlite_conn: sqlite3.Connection) -> None:
    result = execute_statement(sqlite_conn, "SELECT id, name, note FROM people ORDER BY id")
    assert result.columns == ["id", "name", "note"]
    assert result.rows == [("1", "Ann", None), ("2", "Bob", 'a,"b"'), ("3", "Cy", "x|y")]


def test_duplicate_column_names_kept(sqlite_conn: sqlite3.Connection) -> None:
    result = execute_statement(sqlite_conn, "SELECT 1 AS a, 2 AS a")
    assert result.columns == ["a", "a"]
    assert result.rows == [("1", "2")]


def test_statement_without_result_set(sqlite_conn: sqlite3.Connection) -> None:
    result = execute_statement(sqlite_conn, "UPDATE people SET note = 'n' WHERE id = 1")
    assert result.columns == []
    assert result.rows == []
    assert result.rowcount == 1
    assert result.has_columns is False


def test_sqlite_error_becomes_query_error(sqlite_conn: sqlite3.Connection) -> None:
    with pytest.raises(QueryError) as exc_info:
        execute_statement(sqlite_conn, "SELECT * FROM missing_table", index=4)
    err = exc_info.value
    assert err.index == 4
    assert err.statement == "SELECT * FROM missing_table"
    assert "missing_table" in err.message
    assert isinstance(err.__cause__, sqlite3.Error)


@patch("sqlrunner.engines.sql.executor.execute")
def test_driver_error_on_fetch_closes_cursor(mock_execute: MagicMock) -> None:
    mock_cur = MagicMock()
    mock_cur.description = [("n",)]
    mock_cur.fetchall.side_effect = psycopg.OperationalError("connection lost")
    mock_execute.return_value = mock_cur

    with pytest.raises(QueryError, match="connection lost"):
        execute_statement(MagicMock(), "SELECT 1", index=2)

    mock_cur.close.assert_called_once()


@patch("sqlrunner.engines.sql.executor.execute")
def test_cursor_closed_after_success(mock_execute: MagicMock) -> None:
    mock_cur = MagicMock()
    mock_cur.description = [("n",)]
    mock_cur.fetchall.return_value = [(1,), (None,)]
    mock_cur.rowcount = 2
    mock_execute.return_value = mock_cur

    result = execute_statement(MagicMock(), "SELECT n FROM t")

    assert result.rows == [("1",), (None,)]
    mock_cur.close.assert_called_once()


@pytest.mark.parametrize(
    "error",
    [
        TrinoInternalError({"message": "boom"}),
        TrinoConnectionError("lost"),
    ],
)
def test_trino_errors_become_query_error(error: Exception) -> None:
    conn = MagicMock()
    conn.cursor.return_value.execute.side_effect = error

    with pytest.raises(QueryError) as exc_info:
        execute_statement(conn, "SELECT 1", 1)

    assert exc_info.value.index == 1
    assert exc_info.value.__cause__ is error
