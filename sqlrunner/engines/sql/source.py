"""
Resolve where the statement text comes from.

Priority: --input file, then --code, then standard input.
"""

from pathlib import Path
from typing import TextIO

from sqlrunner.core.errors import InputError


def read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise InputError(f"Input file not found: {path}") from e
    except UnicodeDecodeError as e:
        raise InputError(f"Input file {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise InputError(f"Error reading input file {path}: {e}") from e


def read_source(
    input_file: Path | None, code: str | None, stdin: TextIO
) -> str:
    """Return the raw SQL text from the first configured source."""
    if input_file is not None:
        return read_file(input_file)
    if code:
        return code
    try:
        return stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Error reading from stdin: {e}") from e
