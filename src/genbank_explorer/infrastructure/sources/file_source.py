"""File line source — implements LineSourcePort for plain and gzip files."""

from __future__ import annotations

import gzip
import logging
import zlib
from pathlib import Path

from genbank_explorer.domain.errors import SourceUnavailableError
from genbank_explorer.domain.ports.line_source import LineSourcePort

logger = logging.getLogger(__name__)

_GZIP_SUFFIX = ".gz"


class FileLineSource(LineSourcePort):
    """Read the lines of a flat file, decompressing ``.gz`` files on the fly.

    Parameters
    ----------
    encoding : str
        Text encoding of the files. Undecodable bytes are replaced.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read_lines(self, path: Path) -> list[str]:
        """Return the lines of *path* without line terminators."""
        path = Path(path)
        if not path.is_file():
            raise SourceUnavailableError(f"Flat file not found: {path}")

        try:
            if path.name.endswith(_GZIP_SUFFIX):
                with gzip.open(path, "rt", encoding=self._encoding, errors="replace") as fh:
                    text = fh.read()
            else:
                text = path.read_text(encoding=self._encoding, errors="replace")
        except (OSError, EOFError, zlib.error) as exc:
            raise SourceUnavailableError(f"Cannot read flat file {path}: {exc}") from exc

        lines = text.splitlines()
        logger.debug("Read %d lines from %s", len(lines), path)
        return lines
