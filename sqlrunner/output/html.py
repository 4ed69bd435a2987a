"""
HTML writer (Jinja2 templates, autoescaped).

To a file, the first result set creates a complete document and every
later one is spliced in as a new ``<table>`` before the last ``</body>``.
To standard output the document head is printed with the first table,
tables follow as they come, and the closing tags are printed on close().
"""

from jinja2 import DictLoader, Environment

from sqlrunner.models import ResultSet, Statement

from .base import NULL_TEXT, SinkWriter

_TEMPLATES = {
    "prologue.html": """\
<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Query Results</title>
    <style>
        table { border-collapse: collapse; margin: 20px 0; }
        th, td { border: 1px solid #ddd; padding: 8px; text-align: left; }
        th { background-color: #f2f2f2; }
    </style>
</head>
<body>
""",
    "epilogue.html": """\
</body>
</html>
""",
    "table.html": """\
<table>
{% if header and columns %}
    <thead>
        <tr>{% for c in columns %}<th>{{ c }}</th>{% endfor %}</tr>
    </thead>
{% endif %}
    <tbody>
{% for row in rows %}
        <tr>{% for v in row %}<td>{{ v }}</td>{% endfor %}</tr>
{% endfor %}
    </tbody>
</table>
""",
    "document.html": """\
{% include "prologue.html" %}
{% include "table.html" %}
{% include "epilogue.html" %}
""",
}

BODY_CLOSE = "</body>"

_HTML_ENV: Environment | None = None


def _get_html_env() -> Environment:
    global _HTML_ENV
    if _HTML_ENV is None:
        _HTML_ENV = Environment(
            loader=DictLoader(_TEMPLATES),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
    return _HTML_ENV


def _context(result: ResultSet, header: bool) -> dict:
    return {
        "header": header,
        "columns": result.columns,
        "rows": [[NULL_TEXT if v is None else v for v in row] for row in result.rows],
    }


def render_table(result: ResultSet, header: bool = True) -> str:
    return _get_html_env().get_template("table.html").render(**_context(result, header))


def render_document(result: ResultSet, header: bool = True) -> str:
    return _get_html_env().get_template("document.html").render(**_context(result, header))


def insert_before_body_close(document: str, fragment: str) -> str:
    """Insert *fragment* before the last ``</body>``; append if there is none."""
    idx = document.rfind(BODY_CLOSE)
    if idx == -1:
        return document + fragment
    return document[:idx] + fragment + document[idx:]


class HtmlWriter(SinkWriter):
    def _write(self, statement: Statement, result: ResultSet) -> None:
        if self.sink.is_stdout:
            if self.first_write:
                self.stdout.write(_get_html_env().get_template("prologue.html").render())
            self.stdout.write(render_table(result, self.sink.header))
            self.stdout.flush()
            return

        path = self.sink.destination
        if self.first_write:
            path.write_text(render_document(result, self.sink.header), encoding="utf-8")
            return
        document = path.read_text(encoding="utf-8")
        table = render_table(result, self.sink.header)
        path.write_text(insert_before_body_close(document, table), encoding="utf-8")

    def close(self) -> None:
        if self.sink.is_stdout and not self.first_write:
            self.stdout.write(_get_html_env().get_template("epilogue.html").render())
            self.stdout.flush()
