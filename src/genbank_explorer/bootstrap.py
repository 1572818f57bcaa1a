"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from genbank_explorer.application.use_cases.load_entries import LoadEntriesUseCase
from genbank_explorer.application.use_cases.query_references import QueryReferencesUseCase
from genbank_explorer.config.loader import get_config, load_config
from genbank_explorer.config.models import ExplorerConfig
from genbank_explorer.domain.models.entry import Entry
from genbank_explorer.domain.ports.flatfile_parser import FlatFileParserPort
from genbank_explorer.domain.ports.line_source import LineSourcePort
from genbank_explorer.domain.ports.result_sink import ResultSinkPort
from genbank_explorer.infrastructure.importers.genbank_parser import GenbankFlatFileParser
from genbank_explorer.infrastructure.output.file_sink import FileResultSink
from genbank_explorer.infrastructure.sources.file_source import FileLineSource


class Container:
    """Simple dependency injection container.

    Wires the infrastructure implementations to domain ports and provides
    pre-configured use cases.

    Usage::

        container = Container()
        result = container.load_entries().execute(Path("data/"))
        answer = container.query_references(result.entries).execute(QueryKind.AUTHORS)
    """

    def __init__(self, config_path: str | Path | None = None) -> None:
        self._config: ExplorerConfig = (
            load_config(Path(config_path)) if config_path else get_config()
        )
        self._source = FileLineSource(encoding=self._config.encoding)
        self._parser = GenbankFlatFileParser(terminal_entry=self._config.terminal_entry)

    # -- Port accessors ------------------------------------------------------

    @property
    def config(self) -> ExplorerConfig:
        return self._config

    @property
    def source(self) -> LineSourcePort:
        return self._source

    @property
    def parser(self) -> FlatFileParserPort:
        return self._parser

    def result_sink(self, path: Path) -> ResultSinkPort:
        """Return a sink writing result lines to *path*."""
        return FileResultSink(
            path,
            append=self._config.output.append,
            encoding=self._config.output.encoding,
        )

    # -- Use Case factories --------------------------------------------------

    def load_entries(self) -> LoadEntriesUseCase:
        """Create a use case for loading a directory of flat files."""
        return LoadEntriesUseCase(source=self._source, parser=self._parser, config=self._config)

    def query_references(self, entries: list[Entry]) -> QueryReferencesUseCase:
        """Create a use case for querying the references of *entries*."""
        return QueryReferencesUseCase(entries)
