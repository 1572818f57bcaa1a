"""Enumerations for GenBank flat-file parsing."""

from enum import Enum


class LineKind(str, Enum):
    """Kind of a top-level flat-file line, decided by its leading tag."""

    LOCUS = "LOCUS"
    ACCESSION = "ACCESSION"
    DEFINITION = "DEFINITION"
    REFERENCE = "REFERENCE"
    AUTHORS = "AUTHORS"
    TITLE = "TITLE"
    JOURNAL = "JOURNAL"
    PUBMED = "PUBMED"
    OTHER = "OTHER"


class TerminalEntryPolicy(str, Enum):
    """What the parser emits for the still-open entry at end of input."""

    WHEN_OPENED = "when_opened"  # Only if a LOCUS line was seen
    ALWAYS = "always"  # Legacy rule: placeholder Entry() when none was opened


class QueryKind(str, Enum):
    """Aggregate queries over parsed references."""

    AUTHORS = "authors"
    PUBLICATIONS = "publications"
    BY_AUTHOR = "by_author"
    BY_PUBLICATION = "by_publication"
