"""
Fan each result set out to every configured sink.

Sink state (first write, open workbook, HTML prologue) lives in one writer
per sink owned by the router, so nothing is shared between runs.
"""

import logging
from typing import TextIO

from sqlrunner.core.errors import OutputError
from sqlrunner.models import OutputFormatEnum, OutputSink, ResultSet, Statement

from .base import SinkWriter
from .html import HtmlWriter
from .spreadsheet import SpreadsheetWriter
from .text import TextWriter

_log = logging.getLogger(__name__)

_WRITERS: dict[OutputFormatEnum, type[SinkWriter]] = {
    OutputFormatEnum.TSV: TextWriter,
    OutputFormatEnum.CSV: TextWriter,
    OutputFormatEnum.JIRA: TextWriter,
    OutputFormatEnum.HTML: HtmlWriter,
    OutputFormatEnum.XLS: SpreadsheetWriter,
    OutputFormatEnum.XLSX: SpreadsheetWriter,
}


def create_writer(sink: OutputSink, *, stdout: TextIO | None = None) -> SinkWriter:
    return _WRITERS[sink.format](sink, stdout=stdout)


class OutputRouter:
    """Writes every result set to all sinks, in configured order."""

    def __init__(
        self, sinks: list[OutputSink], *, stdout: TextIO | None = None
    ) -> None:
        self.sinks = list(sinks)
        self._writers = [create_writer(s, stdout=stdout) for s in self.sinks]
        self._last_index = 0

    def write(self, statement: Statement, result: ResultSet) -> None:
        self._last_index = statement.index
        for writer in self._writers:
            try:
                writer.write(statement, result)
            except Exception as e:
                _log.error(
                    "Output to %s failed for statement %d: %s",
                    writer.sink.name,
                    statement.index,
                    e,
                )
                raise OutputError(writer.sink.name, statement.index, str(e)) from e
            _log.debug(
                "Statement %d written to %s as %s",
                statement.index,
                writer.sink.name,
                writer.sink.format.value,
            )

    def close(self) -> None:
        """Finish every sink; the first failure is raised after all were tried."""
        error: OutputError | None = None
        for writer in self._writers:
            try:
                writer.close()
            except Exception as e:
                _log.error("Closing output %s failed: %s", writer.sink.name, e)
                if error is None:
                    error = OutputError(writer.sink.name, self._last_index, str(e))
                    error.__cause__ = e
        if error is not None:
            raise error

    def __enter__(self) -> "OutputRouter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
