"""Port: Line source, supplying decoded text lines for one flat file."""

from abc import ABC, abstractmethod
from pathlib import Path


class LineSourcePort(ABC):
    """Contract for turning a file path into a sequence of text lines."""

    @abstractmethod
    def read_lines(self, path: Path) -> list[str]:
        """Return the decoded lines of *path*.

        Raises SourceUnavailableError if the file cannot be opened or read.
        """
        ...
