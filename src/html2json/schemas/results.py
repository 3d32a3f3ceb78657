"""Result models for conversions and CSV processing."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from html2json.schemas.nodes import RootNode


class Diagnostic(BaseModel):
    """A non-fatal problem noticed while converting one HTML value.

    Attributes:
        kind: ``"unterminated_tag"`` for a formatting marker with no partner,
            ``"error"`` when extraction stopped early and the tree is partial.
        message: Human readable description.
        offset: Position of the marker inside the content it was found in,
            when known.
    """

    kind: Literal["unterminated_tag", "error"]
    message: str
    offset: int | None = None


class ConversionResult(BaseModel):
    """A converted tree together with its diagnostics."""

    tree: RootNode
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def partial(self) -> bool:
        """True when extraction failed partway through."""
        return any(d.kind == "error" for d in self.diagnostics)


class RowWarning(BaseModel):
    """A CSV row whose HTML cell was left unconverted."""

    row: int = Field(..., ge=1)
    message: str


class CsvResult(BaseModel):
    """Summary of one processed CSV file."""

    input_file: str
    output_file: str
    column: str
    column_found: bool
    records_processed: int = 0
    converted: int = 0
    diagnostics_count: int = 0
    warnings: list[RowWarning] = Field(default_factory=list)


class FileResult(BaseModel):
    """Outcome of one file in a batch run."""

    input: str
    output: str | None = None
    success: bool
    records_processed: int = 0
    warnings: list[RowWarning] = Field(default_factory=list)
    error: str | None = None


class BatchResult(BaseModel):
    """Summary of a batch run over a glob pattern."""

    pattern: str
    output_dir: str
    results: list[FileResult] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.success)
