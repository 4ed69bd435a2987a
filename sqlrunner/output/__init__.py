"""
Output writers: TSV, CSV, Jira, HTML (Jinja2) and XLS/XLSX (openpyxl).

Exports: OutputRouter, parse_output_spec, build_sink, resolve_format.
"""

from sqlrunner.output.formats import build_sink, parse_output_spec, resolve_format
from sqlrunner.output.router import OutputRouter, create_writer

__all__ = [
    "OutputRouter",
    "build_sink",
    "create_writer",
    "parse_output_spec",
    "resolve_format",
]
