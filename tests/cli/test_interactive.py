"""Tests for the interactive session."""

import io
import sqlite3

from sqlrunner.cli.interactive import BANNER, PROMPT, InteractiveSession


def _run(conn: sqlite3.Connection, text: str, **kwargs) -> tuple[InteractiveSession, str]:
    out = io.StringIO()
    session = InteractiveSession(conn, stdin=io.StringIO(text), stdout=out, **kwargs)
    session.run()
    return session, out.getvalue()


def test_executes_on_separator(sqlite_conn: sqlite3.Connection) -> None:
    session, out = _run(sqlite_conn, "SELECT 1 AS A\n/\nSELECT 2 AS B;\n/\n")
    assert out == f"{BANNER}\n{PROMPT}A\n1\n{PROMPT}\nB\n2\n{PROMPT}"
    assert session.executed == 2


def test_exit_stops_session(sqlite_conn: sqlite3.Connection) -> None:
    session, out = _run(sqlite_conn, "SELECT 1 AS A\n/\nEXIT\nSELECT 2 AS B\n/\n")
    assert session.executed == 1
    assert "B" not in out.replace(BANNER, "")


def test_pending_statement_runs_at_end_of_input(sqlite_conn: sqlite3.Connection) -> None:
    session, out = _run(sqlite_conn, "SELECT 5 AS N", header=False)
    assert out.endswith(f"{PROMPT}5\n")
    assert session.executed == 1


def test_error_does_not_end_session(sqlite_conn: sqlite3.Connection) -> None:
    session, out = _run(sqlite_conn, "SELECT * FROM nope\n/\nSELECT &v AS V\n/\nquit\n", params={"v": "9"})
    assert session.failed == 1
    assert session.executed == 1
    assert out.endswith(f"V\n9\n{PROMPT}")
