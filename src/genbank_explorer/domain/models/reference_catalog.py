"""Aggregate author and publication queries over parsed entries.

This module belongs to the Domain layer. It only depends on:
- Pydantic (pragmatic exception for validation)
- Domain record models
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field

from genbank_explorer.domain.models.entry import Entry, Reference


class ReferenceCatalog(BaseModel):
    """Answers author / publication queries over a batch of entries.

    Provides:
    - Distinct authors and distinct titles, sorted
    - Titles by an exact author name
    - Authors of the first publication whose title contains a fragment
    """

    entries: list[Entry] = Field(default_factory=list)

    # -- Iteration -----------------------------------------------------------

    def iter_references(self) -> Iterator[Reference]:
        """Yield every reference in entry order, then reference order."""
        for entry in self.entries:
            yield from entry.references

    @property
    def reference_count(self) -> int:
        return sum(len(entry.references) for entry in self.entries)

    # -- Queries -------------------------------------------------------------

    def all_authors(self) -> list[str]:
        """Return every distinct author, sorted."""
        authors: set[str] = set()
        for ref in self.iter_references():
            authors.update(ref.authors)
        return sorted(authors)

    def all_titles(self) -> list[str]:
        """Return every distinct publication title, sorted."""
        return sorted({ref.title for ref in self.iter_references()})

    def titles_by_author(self, author: str) -> list[str]:
        """Return titles of references listing *author*.

        The author must match exactly, e.g. ``Reilly,L.P.`` rather than
        ``Reilly``.
        """
        return sorted({ref.title for ref in self.iter_references() if author in ref.authors})

    def authors_by_title(self, fragment: str) -> list[str]:
        """Return the authors of the first reference whose title contains *fragment*.

        Matching is a case-sensitive substring test. Only the first matching
        reference is used, even when later references share the fragment.
        """
        for ref in self.iter_references():
            if fragment in ref.title:
                return sorted(ref.authors)
        return []
