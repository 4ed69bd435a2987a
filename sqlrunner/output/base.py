import sys
from typing import TextIO

from sqlrunner.models import OutputSink, ResultSet, Statement

NULL_TEXT = "NULL"


class SinkWriter:
    """Writes successive result sets to one sink, remembering what it already wrote."""

    def __init__(self, sink: OutputSink, *, stdout: TextIO | None = None) -> None:
        self.sink = sink
        self._stdout = stdout
        self.writes = 0

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def first_write(self) -> bool:
        return self.writes == 0

    def write(self, statement: Statement, result: ResultSet) -> None:
        self._write(statement, result)
        self.writes += 1

    def _write(self, statement: Statement, result: ResultSet) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass
