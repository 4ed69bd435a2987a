"""
SQL engine: statement splitting, &name substitution, execution.

Exports: split_statements, substitute_params, execute_statement, read_source.
"""

from sqlrunner.engines.sql.executor import execute_statement
from sqlrunner.engines.sql.params import parse_param_args, substitute_params
from sqlrunner.engines.sql.source import read_source
from sqlrunner.engines.sql.splitter import split_lines, split_statements

__all__ = [
    "execute_statement",
    "parse_param_args",
    "read_source",
    "split_lines",
    "split_statements",
    "substitute_params",
]
