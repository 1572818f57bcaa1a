"""Infrastructure layer: file, parser and output adapters."""

from genbank_explorer.infrastructure.importers.genbank_parser import GenbankFlatFileParser
from genbank_explorer.infrastructure.output.file_sink import FileResultSink
from genbank_explorer.infrastructure.sources.file_source import FileLineSource

__all__ = [
    "GenbankFlatFileParser",
    "FileResultSink",
    "FileLineSource",
]
