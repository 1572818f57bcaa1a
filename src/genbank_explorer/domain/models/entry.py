"""GenBank record models.

Contains the Entry (one LOCUS block) and Reference (one citation inside an
entry) entities. These are Pydantic models so that parsed records can be
dumped as JSON by the command line.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (typing)
- Pydantic (pragmatic exception for validation)
"""

from __future__ import annotations

from pydantic import BaseModel, Field

UNKNOWN = "unknown"


# ---------------------------------------------------------------------------
# Reference
# ---------------------------------------------------------------------------


class Reference(BaseModel):
    """A bibliographic citation attached to a GenBank entry.

    Authors are kept in a set, so the same name listed twice collapses.
    ``pubmed_id`` is ``0`` while no PUBMED line has been seen.
    """

    authors: set[str] = Field(default_factory=set)
    title: str = UNKNOWN
    journal: str = UNKNOWN
    pubmed_id: int = Field(0, description="PubMed identifier, 0 when unset")

    def add_author(self, author: str) -> set[str]:
        """Add *author* to the author set and return the set."""
        self.authors.add(author)
        return self.authors

    @property
    def has_pubmed_id(self) -> bool:
        return self.pubmed_id != 0


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------


class Entry(BaseModel):
    """One GenBank record: a LOCUS block and its references."""

    locus: str = UNKNOWN
    accession: str = Field(UNKNOWN, description="Full ACCESSION line, tag included")
    definition: str = UNKNOWN
    references: list[Reference] = Field(default_factory=list)
