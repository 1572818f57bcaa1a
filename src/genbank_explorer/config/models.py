"""Pydantic models for GenBank Explorer configuration.

These models validate and type the JSON configuration file that drives
file discovery, decoding and parser behaviour.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from genbank_explorer.domain.models.enums import TerminalEntryPolicy


class OutputConfig(BaseModel):
    """How query results are written."""

    append: bool = Field(True, description="Append to an existing output file instead of replacing it")
    encoding: str = "utf-8"


class ExplorerConfig(BaseModel):
    """Root configuration model."""

    file_suffixes: list[str] = Field(
        default_factory=lambda: [".gbff", ".gbff.gz"],
        description="File name endings treated as GenBank flat files",
    )
    encoding: str = Field("utf-8", description="Encoding of the flat files")
    terminal_entry: TerminalEntryPolicy = Field(
        TerminalEntryPolicy.WHEN_OPENED,
        description="Whether a file without LOCUS lines yields a placeholder entry",
    )
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("file_suffixes")
    @classmethod
    def _require_suffixes(cls, v: list[str]) -> list[str]:
        """Reject an empty suffix list and normalise case."""
        suffixes = [s.strip().lower() for s in v if s.strip()]
        if not suffixes:
            raise ValueError("At least one file suffix is required (e.g. '.gbff')")
        return suffixes

    def matches(self, file_name: str) -> bool:
        """True if *file_name* ends with one of the configured suffixes."""
        lower = file_name.lower()
        return any(lower.endswith(suffix) for suffix in self.file_suffixes)
