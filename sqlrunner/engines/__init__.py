"""
Engines: SQL statement handling and the batch runner that drives it.
"""

from sqlrunner.engines.executor import BatchRunner
from sqlrunner.engines.sql import (
    execute_statement,
    split_statements,
    substitute_params,
)

__all__ = [
    "BatchRunner",
    "execute_statement",
    "split_statements",
    "substitute_params",
]
