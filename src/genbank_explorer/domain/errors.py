"""Domain errors — custom exceptions for GenBank Explorer.

These exceptions are raised by the parser, line sources and loaders and
caught by the application or presentation layers.
"""

from __future__ import annotations


class GenbankExplorerError(Exception):
    """Base exception for all GenBank Explorer errors."""


class SourceUnavailableError(GenbankExplorerError, FileNotFoundError):
    """Raised when a flat file (or its directory) cannot be opened or read."""


class MalformedNumberError(GenbankExplorerError, ValueError):
    """Raised when a numeric field (PUBMED) does not hold a valid integer."""

    def __init__(self, value: str, line_number: int | None = None) -> None:
        self.value = value
        self.line_number = line_number
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Invalid integer {value!r}{where}")


class ConfigurationError(GenbankExplorerError):
    """Raised when configuration is invalid or missing."""
