"""
Line-oriented writers: TSV, CSV and Jira wiki tables.

Each result set becomes one block (optional header line + one line per
row). Blocks after the first are appended to the same destination,
preceded by a blank line.
"""

import csv
import io

from sqlrunner.models import OutputFormatEnum, ResultSet, Statement

from .base import NULL_TEXT, SinkWriter


def format_tsv(values: list[str]) -> str:
    return "\t".join(values)


def format_csv(values: list[str]) -> str:
    """Quote fields holding a comma, quote or line break; double inner quotes."""
    if values == [""]:
        # csv writes a lone empty field as "" to tell it from an empty row.
        return ""
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(values)
    return buf.getvalue()[:-1]


def escape_jira(value: str) -> str:
    value = value.replace("|", "\\|")
    return value.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


def format_jira(values: list[str]) -> str:
    return "|" + "|".join(escape_jira(v) for v in values) + "|"


def format_jira_header(columns: list[str]) -> str:
    return "||" + "||".join(escape_jira(c) for c in columns) + "||"


_ROW_FORMATTERS = {
    OutputFormatEnum.TSV: format_tsv,
    OutputFormatEnum.CSV: format_csv,
    OutputFormatEnum.JIRA: format_jira,
}


def render_block(result: ResultSet, fmt: OutputFormatEnum, header: bool) -> str:
    """Render one result set as text lines, each ending in a newline."""
    format_row = _ROW_FORMATTERS[fmt]
    lines: list[str] = []
    if header and result.has_columns:
        if fmt == OutputFormatEnum.JIRA:
            lines.append(format_jira_header(result.columns))
        else:
            lines.append(format_row(result.columns))
    for row in result.rows:
        lines.append(format_row([NULL_TEXT if v is None else v for v in row]))
    return "".join(line + "\n" for line in lines)


class TextWriter(SinkWriter):
    """TSV / CSV / Jira writer. Files are created on the first write, appended afterwards."""

    def _write(self, statement: Statement, result: ResultSet) -> None:
        block = render_block(result, self.sink.format, self.sink.header)
        if not self.first_write:
            block = "\n" + block

        if self.sink.is_stdout:
            self.stdout.write(block)
            self.stdout.flush()
            return

        mode = "w" if self.first_write else "a"
        with open(self.sink.destination, mode, encoding="utf-8", newline="") as f:
            f.write(block)
