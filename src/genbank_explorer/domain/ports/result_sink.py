"""Port: Result sink, the destination of query result lines."""

from abc import ABC, abstractmethod
from collections.abc import Iterable


class ResultSinkPort(ABC):
    """Contract for writing result lines to a destination."""

    @abstractmethod
    def write_lines(self, lines: Iterable[str]) -> int:
        """Write each item of *lines* as one line. Returns the number written."""
        ...
