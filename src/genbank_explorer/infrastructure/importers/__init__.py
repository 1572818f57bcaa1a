"""Flat-file importers that turn raw lines into GenBank entries."""

from genbank_explorer.infrastructure.importers.genbank_parser import (
    GenbankFlatFileParser,
    classify_line,
    split_authors,
)

__all__ = ["GenbankFlatFileParser", "classify_line", "split_authors"]
