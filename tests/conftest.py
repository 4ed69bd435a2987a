import sqlite3
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def sqlite_db(tmp_path: Path) -> Path:
    """SQLite file with a one-row DUAL table and a small people table."""
    path = tmp_path / "test.db"
    conn = sqlite3.connect(path)
    try:
        conn.executescript(
            """
            CREATE TABLE DUAL (DUMMY TEXT);
            INSERT INTO DUAL VALUES ('X');
            CREATE TABLE people (id INTEGER, name TEXT, note TEXT);
            INSERT INTO people VALUES (1, 'Ann', NULL);
            INSERT INTO people VALUES (2, 'Bob', 'a,"b"');
            INSERT INTO people VALUES (3, 'Cy', 'x|y');
            """
        )
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture
def sqlite_url(sqlite_db: Path) -> str:
    return f"sqlite:///{sqlite_db}"


@pytest.fixture
def sqlite_conn(sqlite_db: Path) -> Iterator[sqlite3.Connection]:
    conn = sqlite3.connect(sqlite_db, isolation_level=None)
    try:
        yield conn
    finally:
        conn.close()
