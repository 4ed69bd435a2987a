"""
Batch runner: substitute, execute and write each statement in order.

The first QueryError or OutputError aborts the batch; statements after it
are not executed.
"""

import logging
from typing import Any

from sqlrunner.engines.sql import execute_statement, substitute_params
from sqlrunner.models import Statement
from sqlrunner.output import OutputRouter

_log = logging.getLogger(__name__)


class BatchRunner:
    """
    run(statements) -> number of statements executed

    Connection and router are owned by the caller; the runner never closes them.
    """

    def __init__(
        self,
        conn: Any,
        router: OutputRouter,
        params: dict[str, str] | None = None,
    ) -> None:
        self.conn = conn
        self.router = router
        self.params = params or {}

    def run_statement(self, statement: Statement) -> None:
        sql = substitute_params(statement.text, self.params)
        _log.debug("Statement %d SQL: %s", statement.index, sql)
        result = execute_statement(self.conn, sql, statement.index)
        _log.info(
            "Statement %d returned %d row(s)%s",
            statement.index,
            len(result.rows),
            "" if result.has_columns else f" (rowcount={result.rowcount})",
        )
        self.router.write(statement, result)

    def run(self, statements: list[Statement]) -> int:
        for statement in statements:
            self.run_statement(statement)
        _log.info("Executed %d statement(s)", len(statements))
        return len(statements)
