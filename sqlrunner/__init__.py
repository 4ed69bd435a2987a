"""Run batches of SQL statements and write their results as TSV, CSV, HTML, Jira or Excel."""

__version__ = "0.1.0"
