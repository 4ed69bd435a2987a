"""
Interactive mode: read SQL from a terminal, run it on every ``/`` line.

Results always go to standard output as TSV. A failing statement is logged
and the session goes on; ``exit`` or ``quit`` ends it.
"""

import logging
import sys
from typing import Any, TextIO

from sqlrunner.core.errors import QueryError
from sqlrunner.engines import BatchRunner
from sqlrunner.engines.sql import split_lines
from sqlrunner.engines.sql.splitter import is_separator
from sqlrunner.models import OutputFormatEnum, OutputSink, Statement
from sqlrunner.output import OutputRouter

_log = logging.getLogger(__name__)

BANNER = "sqlrunner interactive mode. Type SQL commands, use '/' to execute, 'exit' to quit."
PROMPT = "SQL> "
EXIT_COMMANDS = ("exit", "quit")


class InteractiveSession:
    def __init__(
        self,
        conn: Any,
        params: dict[str, str] | None = None,
        *,
        header: bool = True,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        sink = OutputSink(destination=None, format=OutputFormatEnum.TSV, header=header)
        self.router = OutputRouter([sink], stdout=self.stdout)
        self.runner = BatchRunner(conn, self.router, params)
        self.executed = 0
        self.failed = 0

    def _prompt(self) -> None:
        self.stdout.write(PROMPT)
        self.stdout.flush()

    def _execute(self, lines: list[str]) -> None:
        for statement in split_lines(lines):
            index = self.executed + self.failed + 1
            try:
                self.runner.run_statement(Statement(index, statement.text, statement.label))
                self.executed += 1
            except QueryError as e:
                self.failed += 1
                _log.error("%s", e)

    def run(self) -> None:
        self.stdout.write(BANNER + "\n")
        self._prompt()
        buffer: list[str] = []
        try:
            for line in self.stdin:
                if line.strip().lower() in EXIT_COMMANDS:
                    break
                if is_separator(line):
                    self._execute(buffer)
                    buffer = []
                    self._prompt()
                    continue
                buffer.append(line.rstrip("\r\n"))
            self._execute(buffer)
        finally:
            self.router.close()
        _log.info("Interactive session: %d executed, %d failed", self.executed, self.failed)
