"""Use Case: Load Entries.

Discovers GenBank flat files in a directory, reads each one through a
LineSourcePort and parses it with a FlatFileParserPort. A file that cannot
be read or parsed is recorded as a failure; the rest of the batch goes on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from genbank_explorer.config.models import ExplorerConfig
from genbank_explorer.domain.errors import (
    MalformedNumberError,
    SourceUnavailableError,
)
from genbank_explorer.domain.models.entry import Entry
from genbank_explorer.domain.ports.flatfile_parser import FlatFileParserPort
from genbank_explorer.domain.ports.line_source import LineSourcePort

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Outcome of loading one directory."""

    entries: list[Entry] = field(default_factory=list)
    files_parsed: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failures: dict[Path, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


class LoadEntriesUseCase:
    """Parse every flat file of a directory into entries."""

    def __init__(
        self,
        source: LineSourcePort,
        parser: FlatFileParserPort,
        config: ExplorerConfig,
    ) -> None:
        self._source = source
        self._parser = parser
        self._config = config

    def discover(self, directory: Path) -> tuple[list[Path], list[Path]]:
        """Split the files of *directory* into (flat files, other files), by name.

        Raises:
            SourceUnavailableError: If *directory* is missing or not a directory.
        """
        directory = Path(directory)
        if not directory.exists():
            raise SourceUnavailableError(f"Directory {directory} does not exist")
        if not directory.is_dir():
            raise SourceUnavailableError(f"{directory} is not a directory")

        selected: list[Path] = []
        skipped: list[Path] = []
        for path in sorted(p for p in directory.iterdir() if p.is_file()):
            if self._config.matches(path.name):
                selected.append(path)
            else:
                skipped.append(path)
        return selected, skipped

    def parse_file(self, path: Path) -> list[Entry]:
        """Parse a single flat file.

        Raises:
            SourceUnavailableError: If the file cannot be read.
            MalformedNumberError: If a PUBMED value is not an integer.
        """
        lines = self._source.read_lines(path)
        return self._parser.parse(lines)

    def execute(self, directory: Path) -> LoadResult:
        """Load every flat file in *directory*.

        Returns:
            A LoadResult with all entries, in file-name order.

        Raises:
            SourceUnavailableError: If *directory* itself is unusable.
        """
        files, skipped = self.discover(directory)
        result = LoadResult(skipped=skipped)

        for path in skipped:
            logger.warning("File %s is not a GenBank flat file, skipped", path)

        for path in files:
            try:
                entries = self.parse_file(path)
            except (SourceUnavailableError, MalformedNumberError) as exc:
                logger.warning("Failed to parse %s: %s", path, exc)
                result.failures[path] = str(exc)
                continue
            logger.info("Parsed %d entries from %s", len(entries), path)
            result.entries.extend(entries)
            result.files_parsed.append(path)

        return result
