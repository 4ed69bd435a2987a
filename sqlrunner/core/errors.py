"""
Exceptions raised by sqlrunner.

Every error keeps enough context (statement index, destination, URL) to
reproduce the failure; the CLI logs the message and exits non-zero.
"""


class SQLRunnerError(Exception):
    """Base class for all sqlrunner errors."""

    pass


class InputError(SQLRunnerError):
    """Raised when the statement source cannot be read."""

    pass


class DBConnectionError(SQLRunnerError):
    """Raised when the database cannot be reached or the URL is invalid."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        self.url = url
        super().__init__(f"{message} ({url})" if url else message)


class QueryError(SQLRunnerError):
    """Raised when one statement fails to execute or to fetch its rows."""

    def __init__(self, statement: str, index: int, message: str) -> None:
        self.statement = statement
        self.index = index
        self.message = message
        super().__init__(f"Statement {index} failed: {message}\nSQL: {statement}")


class OutputError(SQLRunnerError):
    """Raised when a sink cannot be opened, written or saved."""

    def __init__(self, destination: str, index: int, message: str) -> None:
        self.destination = destination
        self.index = index
        self.message = message
        super().__init__(
            f"Writing statement {index} to {destination} failed: {message}"
        )
