"""File result sink — implements ResultSinkPort by writing to a text file."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from genbank_explorer.domain.ports.result_sink import ResultSinkPort


class FileResultSink(ResultSinkPort):
    """Write result lines to *path*, creating the file (and parents) when missing.

    Parameters
    ----------
    path : Path
        Destination file.
    append : bool
        Append to an existing file (default) instead of replacing it.
    encoding : str
        Text encoding of the written file.
    """

    def __init__(self, path: Path, append: bool = True, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._mode = "a" if append else "w"
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def write_lines(self, lines: Iterable[str]) -> int:
        """Write each item of *lines* followed by a newline."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        written = 0
        with self._path.open(self._mode, encoding=self._encoding) as fh:
            for line in lines:
                fh.write(f"{line}\n")
                written += 1
        return written
