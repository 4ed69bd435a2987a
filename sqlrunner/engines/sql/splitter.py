"""
Split a SQL script into statements on ``/`` separator lines (sqlplus style).

A separator is a line holding only ``/`` characters once trimmed. Semicolons
are not statement terminators here: a trailing ``;`` is simply stripped, so
PL/SQL blocks and statements with ``;`` inside literals pass through intact.

A ``-- tab = <name>`` comment line inside a statement labels it (used as the
sheet name for spreadsheet output) and is removed from the statement text.
"""

import re
from collections.abc import Iterable

from sqlrunner.models import Statement

_DIRECTIVE_PATTERN = re.compile(r"^--\s*tab\s*=\s*(?P<name>.*?)\s*$", re.IGNORECASE)


def is_separator(line: str) -> bool:
    """True if *line* is non-empty after trimming and consists only of ``/``."""
    s = line.strip()
    return bool(s) and s.strip("/") == ""


def clean_statement(sql: str) -> str:
    """Trim *sql* and strip any run of trailing semicolons."""
    s = sql.strip()
    while s.endswith(";"):
        s = s[:-1].rstrip()
    return s


def parse_directive(line: str) -> str | None:
    """Return the label of a ``-- tab = <name>`` line, else None."""
    m = _DIRECTIVE_PATTERN.match(line.strip())
    if m is None:
        return None
    return m.group("name")


def split_lines(lines: Iterable[str]) -> list[Statement]:
    """Split an iterable of lines (with or without line endings) into statements."""
    raw: list[tuple[str, str | None]] = []
    buffer: list[str] = []
    label: str | None = None

    for line in lines:
        line = line.rstrip("\r\n")
        if is_separator(line):
            if buffer:
                raw.append(("\n".join(buffer), label))
            buffer = []
            label = None
            continue
        directive = parse_directive(line)
        if directive is not None:
            label = directive
            continue
        buffer.append(line)

    if buffer:
        raw.append(("\n".join(buffer), label))

    statements: list[Statement] = []
    for text, lbl in raw:
        sql = clean_statement(text)
        if sql:
            statements.append(Statement(len(statements) + 1, sql, lbl or None))
    return statements


def split_statements(text: str) -> list[Statement]:
    """Split a whole script into an ordered batch of statements."""
    return split_lines(text.split("\n"))
