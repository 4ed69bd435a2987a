"""
Excel writer (openpyxl).

One workbook per sink, one sheet per statement. The workbook is created on
the first result set with its default sheet removed, and saved in full after
every statement so the file on disk always holds every finished sheet.
"""

import logging

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.worksheet.worksheet import Worksheet

from sqlrunner.models import ResultSet, Statement

from .base import SinkWriter

_log = logging.getLogger(__name__)

MAX_SHEET_TITLE = 31
DEFAULT_SHEET_TITLE = "Sheet"
_INVALID_TITLE_CHARS = str.maketrans("", "", "\\/?*[]:")


def sanitize_sheet_title(label: str) -> str:
    """Drop characters Excel forbids in sheet names and cut to 31 characters."""
    title = label.translate(_INVALID_TITLE_CHARS).strip()[:MAX_SHEET_TITLE].strip()
    return title or DEFAULT_SHEET_TITLE


def sheet_title(statement: Statement) -> str:
    if statement.label:
        return sanitize_sheet_title(statement.label)
    return f"Query{statement.index}"


def unique_sheet_title(title: str, existing: list[str]) -> str:
    """Append `` (2)``, `` (3)``... until *title* is unused (case-insensitive)."""
    taken = {name.lower() for name in existing}
    if title.lower() not in taken:
        return title
    n = 2
    while True:
        suffix = f" ({n})"
        candidate = title[: MAX_SHEET_TITLE - len(suffix)] + suffix
        if candidate.lower() not in taken:
            return candidate
        n += 1


def set_text(ws: Worksheet, row: int, column: int, value: str) -> None:
    """Store *value* as a string cell, never as a formula."""
    cell = ws.cell(row=row, column=column, value=ILLEGAL_CHARACTERS_RE.sub("", value))
    if cell.data_type == "f":
        cell.data_type = "s"


class SpreadsheetWriter(SinkWriter):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._workbook: Workbook | None = None

    def _write(self, statement: Statement, result: ResultSet) -> None:
        if self._workbook is None:
            self._workbook = Workbook()
            self._workbook.remove(self._workbook.active)

        wb = self._workbook
        title = unique_sheet_title(sheet_title(statement), wb.sheetnames)
        ws = wb.create_sheet(title=title)

        row_num = 1
        if self.sink.header and result.has_columns:
            for col, name in enumerate(result.columns, start=1):
                set_text(ws, row_num, col, name)
            row_num += 1

        for values in result.rows:
            for col, value in enumerate(values, start=1):
                # NULL is left as an empty cell.
                if value is not None:
                    set_text(ws, row_num, col, value)
            row_num += 1

        wb.save(self.sink.destination)
        _log.debug("Saved sheet '%s' (%d rows) to %s", title, len(result.rows), self.sink.name)

    def close(self) -> None:
        if self._workbook is not None:
            self._workbook.close()
