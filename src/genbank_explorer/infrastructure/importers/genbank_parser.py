"""GenBank flat-file parser.

Turns the lines of one GenBank flat file into ``Entry`` records. The
format has no formal grammar: each top-level line starts with a tag at
column 0 (``LOCUS``, ``DEFINITION``, ``AUTHORS``...) and a field value
continues on every following line indented by exactly 12 spaces.

The scan is a single forward pass with one line of pushback. Each trimmed
line is classified by its tag (pure), then dispatched against a per-call
``_ParseState`` holding the open entry and the open reference.

Example::

    parser = GenbankFlatFileParser()
    entries = parser.parse(path.read_text().splitlines())
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional

from genbank_explorer.domain.errors import MalformedNumberError
from genbank_explorer.domain.models.entry import Entry, Reference
from genbank_explorer.domain.models.enums import LineKind, TerminalEntryPolicy
from genbank_explorer.domain.ports.flatfile_parser import FlatFileParserPort

logger = logging.getLogger(__name__)

# A line starting with this prefix continues the previous field
CONTINUATION_INDENT = " " * 12

# Characters stripped from the trimmed line to reach the field value
_TAG_WIDTHS: dict[LineKind, int] = {
    LineKind.DEFINITION: 10,
    LineKind.AUTHORS: 8,
    LineKind.TITLE: 5,
    LineKind.JOURNAL: 7,
    LineKind.PUBMED: 7,
}

# Checked in declaration order; first match wins
_TAGGED_KINDS = tuple(kind for kind in LineKind if kind is not LineKind.OTHER)

# "A, B and C" / "A and B"; " and " needs whitespace on both sides
_AUTHOR_SEPARATOR = re.compile(r",\s|\sand\s")
# Optionally signed decimal integer, nothing else
_INTEGER = re.compile(r"[+-]?\d+")


def classify_line(trimmed: str) -> LineKind:
    """Return the kind of a trimmed top-level line."""
    for kind in _TAGGED_KINDS:
        if trimmed.startswith(kind.value):
            return kind
    return LineKind.OTHER


def split_authors(text: str) -> list[str]:
    """Split an AUTHORS value into trimmed, non-empty names.

    >>> split_authors("Reilly,L.P., Evans,M. and Atari,N.")
    ['Reilly,L.P.', 'Evans,M.', 'Atari,N.']
    """
    names = (token.strip() for token in _AUTHOR_SEPARATOR.split(text))
    return [name for name in names if name]


class _LineCursor:
    """Iterator over raw lines with a one-line pushback buffer.

    Line terminators are removed on the way in. ``line_number`` is the
    1-based number of the last physical line read.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._held: Optional[str] = None
        self.line_number = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._held is not None:
            line, self._held = self._held, None
            return line
        line = next(self._lines)
        self.line_number += 1
        return line.rstrip("\r\n")

    def push_back(self, line: str) -> None:
        """Hold *line* so the next ``next()`` returns it again."""
        self._held = line


@dataclass
class _ParseState:
    """Cursors owned by a single ``parse`` call."""

    entries: list[Entry] = field(default_factory=list)
    entry: Optional[Entry] = None
    reference: Optional[Reference] = None

    def close_reference(self) -> None:
        if self.reference is not None and self.entry is not None:
            self.entry.references.append(self.reference)
        self.reference = None

    def open_entry(self) -> Entry:
        self.close_reference()
        if self.entry is not None:
            self.entries.append(self.entry)
            logger.debug(
                "Closed entry %s with %d reference(s)",
                self.entry.locus,
                len(self.entry.references),
            )
        self.entry = Entry()
        return self.entry

    def open_reference(self) -> Reference:
        self.close_reference()
        self.reference = Reference()
        return self.reference


class GenbankFlatFileParser(FlatFileParserPort):
    """Parse GenBank flat-file lines into ``Entry`` records.

    Parameters
    ----------
    terminal_entry : TerminalEntryPolicy
        What to emit for the open entry at end of input.
        ``WHEN_OPENED`` (default) appends it only if a LOCUS line was seen,
        so input without records yields ``[]``. ``ALWAYS`` keeps the legacy
        rule and appends a placeholder ``Entry()`` in that case.

    Notes
    -----
    Field lines seen without their context (an AUTHORS line before any
    REFERENCE, an ACCESSION line before any LOCUS) are ignored.
    A parser holds no per-file state and can be reused across files.
    """

    def __init__(self, terminal_entry: TerminalEntryPolicy = TerminalEntryPolicy.WHEN_OPENED) -> None:
        self._terminal_entry = TerminalEntryPolicy(terminal_entry)

    @property
    def terminal_entry(self) -> TerminalEntryPolicy:
        return self._terminal_entry

    def parse(self, lines: Iterable[str]) -> list[Entry]:
        """Parse *lines* and return the entries in file order.

        Raises
        ------
        MalformedNumberError
            If a PUBMED line does not hold an integer.
        """
        state = _ParseState()
        cursor = _LineCursor(lines)

        for raw in cursor:
            trimmed = raw.strip()
            kind = classify_line(trimmed)

            if kind is LineKind.LOCUS:
                entry = state.open_entry()
                tokens = raw.split()
                if len(tokens) > 1:
                    entry.locus = tokens[1]
            elif kind is LineKind.OTHER:
                continue
            elif state.entry is None:
                logger.debug("Line %d: %s outside an entry, ignored", cursor.line_number, kind.value)
            elif kind is LineKind.ACCESSION:
                state.entry.accession = trimmed
            elif kind is LineKind.DEFINITION:
                state.entry.definition = self._read_field(cursor, trimmed, kind)
            elif kind is LineKind.REFERENCE:
                state.open_reference()
            elif state.reference is None:
                logger.debug(
                    "Line %d: %s outside a reference, ignored", cursor.line_number, kind.value
                )
            elif kind is LineKind.AUTHORS:
                for author in split_authors(self._read_field(cursor, trimmed, kind)):
                    state.reference.add_author(author)
            elif kind is LineKind.TITLE:
                state.reference.title = self._read_field(cursor, trimmed, kind)
            elif kind is LineKind.JOURNAL:
                # Journal continuation lines are joined untrimmed
                state.reference.journal = self._read_field(
                    cursor, trimmed, kind, strip_continuations=False
                )
            elif kind is LineKind.PUBMED:
                state.reference.pubmed_id = self._read_integer(cursor, trimmed, kind)

        state.close_reference()
        if state.entry is not None:
            state.entries.append(state.entry)
        elif self._terminal_entry is TerminalEntryPolicy.ALWAYS:
            state.entries.append(Entry())

        logger.debug("Parsed %d entries from %d lines", len(state.entries), cursor.line_number)
        return state.entries

    def parse_text(self, text: str) -> list[Entry]:
        """Parse a whole flat file held in a string."""
        return self.parse(text.splitlines())

    # -- Field readers -------------------------------------------------------

    @staticmethod
    def _read_field(
        cursor: _LineCursor,
        trimmed: str,
        kind: LineKind,
        strip_continuations: bool = True,
    ) -> str:
        """Return the value of a field plus its continuation lines, space-joined.

        Stops at the first line not indented by 12 spaces and pushes it back
        so that it is classified next.
        """
        parts = [trimmed[_TAG_WIDTHS[kind] :]]
        for raw in cursor:
            if not raw.startswith(CONTINUATION_INDENT):
                cursor.push_back(raw)
                break
            parts.append(raw.strip() if strip_continuations else raw)
        return " ".join(part for part in parts if part).strip()

    @staticmethod
    def _read_integer(cursor: _LineCursor, trimmed: str, kind: LineKind) -> int:
        value = trimmed[_TAG_WIDTHS[kind] :].strip()
        if not _INTEGER.fullmatch(value):
            raise MalformedNumberError(value, cursor.line_number)
        return int(value)
