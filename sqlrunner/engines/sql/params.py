"""
``&name`` parameter substitution.

Values are pasted into the SQL text as-is. There is no quoting or escaping:
whoever supplies the parameters also supplies the statements.
"""

import re

import typer


def _placeholder_pattern(names: list[str]) -> re.Pattern[str]:
    # Longest name first so "&idx" is not taken as "&id" followed by "x".
    ordered = sorted(names, key=len, reverse=True)
    return re.compile("&(" + "|".join(re.escape(n) for n in ordered) + ")")


def substitute_params(sql: str, params: dict[str, str] | None) -> str:
    """
    Replace every ``&<name>`` in *sql* with ``params[name]``.

    All placeholders are replaced in one pass, so a value that itself
    contains ``&other`` is never substituted again. Unknown ``&tokens``
    are left untouched.
    """
    names = [k for k in (params or {}) if k]
    if not names:
        return sql
    pattern = _placeholder_pattern(names)
    return pattern.sub(lambda m: str(params[m.group(1)]), sql)


def parse_param_args(args: list[str]) -> dict[str, str]:
    """
    Parse ``name=value`` / ``-name=value`` tokens given after ``--``.

    The value is everything after the first ``=`` and may be empty.
    A later token for the same name wins.
    """
    params: dict[str, str] = {}
    for arg in args:
        name, sep, value = arg.partition("=")
        if name.startswith("-"):
            name = name[1:]
        name = name.strip()
        if not sep or not name:
            raise typer.BadParameter(
                f"Invalid parameter '{arg}'. Expected name=value or -name=value."
            )
        params[name] = value
    return params
