"""
Output format resolution and --output value parsing.
"""

from pathlib import Path

from sqlrunner.models import OutputFormatEnum, OutputSink

EXTENSION_FORMATS: dict[str, OutputFormatEnum] = {
    ".csv": OutputFormatEnum.CSV,
    ".html": OutputFormatEnum.HTML,
    ".htm": OutputFormatEnum.HTML,
    ".xls": OutputFormatEnum.XLS,
    ".xlsx": OutputFormatEnum.XLSX,
    ".jira": OutputFormatEnum.JIRA,
}

STDOUT_DESTINATION = "-"


def parse_format(value: str | OutputFormatEnum) -> OutputFormatEnum:
    if isinstance(value, OutputFormatEnum):
        return value
    try:
        return OutputFormatEnum(value.strip().lower())
    except ValueError:
        allowed = ", ".join(f.value for f in OutputFormatEnum)
        raise ValueError(f"Unknown output format '{value}' (expected one of: {allowed})") from None


def resolve_format(
    explicit: str | OutputFormatEnum | None, destination: Path | None
) -> OutputFormatEnum:
    """
    Explicit format wins; otherwise infer from the file extension.
    Unknown extensions and standard output default to TSV.
    """
    if explicit:
        return parse_format(explicit)
    if destination is None:
        return OutputFormatEnum.TSV
    return EXTENSION_FORMATS.get(destination.suffix.lower(), OutputFormatEnum.TSV)


def build_sink(
    destination: Path | None,
    format: str | OutputFormatEnum | None = None,
    *,
    header: bool = True,
) -> OutputSink:
    return OutputSink(
        destination=destination,
        format=resolve_format(format, destination),
        header=header,
    )


def parse_output_spec(
    spec: str,
    *,
    default_format: str | OutputFormatEnum | None = None,
    header: bool = True,
) -> OutputSink:
    """
    Build one OutputSink from an ``--output`` value: ``[FORMAT:]PATH``.

    ``-`` as PATH means standard output. A prefix is only taken as a format
    when it names one, so ``C:\\out.csv`` stays a path.
    """
    fmt: str | OutputFormatEnum | None = default_format
    path = spec
    prefix, sep, rest = spec.partition(":")
    if sep and rest and prefix.lower() in {f.value for f in OutputFormatEnum}:
        fmt = prefix
        path = rest
    destination = None if path == STDOUT_DESTINATION else Path(path)
    return build_sink(destination, fmt, header=header)
