"""Port for parsing flat-file lines into Entry records."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from genbank_explorer.domain.models.entry import Entry


class FlatFileParserPort(ABC):
    """Interface for converting raw flat-file lines into structured entries."""

    @abstractmethod
    def parse(self, lines: Iterable[str]) -> list[Entry]:
        """Parse *lines* and return the entries in file order."""
        ...
