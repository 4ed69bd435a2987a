"""
Data models for a sqlrunner run.

Entities: Statement, ResultSet, OutputSink, DataSource.

Statement and ResultSet are plain records passed between the splitter,
executor and output writers. OutputSink and DataSource are validated
pydantic models built once, before any statement runs.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import NamedTuple

from pydantic import BaseModel, Field, model_validator

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ProductTypeEnum(str, Enum):
    """Supported database product types."""

    ORACLE = "oracle"
    POSTGRES = "postgres"
    MYSQL = "mysql"
    TRINO = "trino"
    SQLITE = "sqlite"


class OutputFormatEnum(str, Enum):
    """Output formats a sink can be written in."""

    TSV = "tsv"
    CSV = "csv"
    JIRA = "jira"
    HTML = "html"
    XLS = "xls"
    XLSX = "xlsx"

    @property
    def is_spreadsheet(self) -> bool:
        return self in (OutputFormatEnum.XLS, OutputFormatEnum.XLSX)


# ---------------------------------------------------------------------------
# Statement batch and result set
# ---------------------------------------------------------------------------


class Statement(NamedTuple):
    index: int  # 1-based position in the batch
    text: str
    label: str | None = None  # from a "-- tab = <name>" directive


@dataclass
class ResultSet:
    """Columns and fully materialized rows of one statement.

    Cells are text; ``None`` marks SQL NULL so each writer can render it
    the way its format expects.
    """

    columns: list[str] = field(default_factory=list)
    rows: list[tuple[str | None, ...]] = field(default_factory=list)
    rowcount: int = -1

    @property
    def has_columns(self) -> bool:
        return len(self.columns) > 0


# ---------------------------------------------------------------------------
# OutputSink - one destination/format/header combination
# ---------------------------------------------------------------------------


class OutputSink(BaseModel):
    destination: Path | None = Field(
        default=None, description="Output file; None writes to standard output."
    )
    format: OutputFormatEnum = OutputFormatEnum.TSV
    header: bool = True

    @property
    def is_stdout(self) -> bool:
        return self.destination is None

    @property
    def name(self) -> str:
        """Human-readable destination for log and error messages."""
        return "<stdout>" if self.destination is None else str(self.destination)

    @model_validator(mode="after")
    def spreadsheet_requires_file(self) -> "OutputSink":
        if self.format.is_spreadsheet and self.destination is None:
            raise ValueError(
                f"Output format '{self.format.value}' requires an output file."
            )
        return self


# ---------------------------------------------------------------------------
# DataSource - connection parameters parsed from a URL
# ---------------------------------------------------------------------------


class DataSource(BaseModel):
    product_type: ProductTypeEnum
    host: str | None = None
    port: int | None = Field(default=None, ge=1, le=65535)
    database: str = Field(..., min_length=1)
    username: str | None = None
    password: str = ""
    options: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def server_requires_host(self) -> "DataSource":
        if self.product_type != ProductTypeEnum.SQLITE and not self.host:
            raise ValueError(f"host is required for {self.product_type.value}")
        return self
