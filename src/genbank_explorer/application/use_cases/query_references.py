"""Use Case: Query References.

Runs the author / publication queries of a ReferenceCatalog and packages
the answer with what was asked.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from genbank_explorer.domain.models.entry import Entry
from genbank_explorer.domain.models.enums import QueryKind
from genbank_explorer.domain.models.reference_catalog import ReferenceCatalog


class QueryResult(BaseModel):
    """Answer to one aggregate query."""

    kind: QueryKind
    subject: Optional[str] = Field(None, description="Author or title fragment queried")
    items: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items


class QueryReferencesUseCase:
    """Answer aggregate queries over a batch of parsed entries."""

    def __init__(self, entries: list[Entry]) -> None:
        self._catalog = ReferenceCatalog(entries=entries)

    def execute(self, kind: QueryKind, subject: Optional[str] = None) -> QueryResult:
        """Run the query *kind*.

        Args:
            kind: Which query to run.
            subject: Author name (BY_AUTHOR) or title fragment (BY_PUBLICATION).

        Raises:
            ValueError: If a "by" query is run without a subject.
        """
        kind = QueryKind(kind)
        if kind in (QueryKind.BY_AUTHOR, QueryKind.BY_PUBLICATION) and not subject:
            raise ValueError(f"Query '{kind.value}' needs a subject")

        if kind is QueryKind.AUTHORS:
            items = self._catalog.all_authors()
        elif kind is QueryKind.PUBLICATIONS:
            items = self._catalog.all_titles()
        elif kind is QueryKind.BY_AUTHOR:
            items = self._catalog.titles_by_author(subject)
        else:
            items = self._catalog.authors_by_title(subject)

        return QueryResult(kind=kind, subject=subject, items=items)
