"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from genbank_explorer.domain.models.entry import Entry, Reference
from genbank_explorer.domain.models.enums import LineKind, QueryKind, TerminalEntryPolicy
from genbank_explorer.domain.models.reference_catalog import ReferenceCatalog

__all__ = [
    # Records
    "Entry",
    "Reference",
    # Enums
    "LineKind",
    "QueryKind",
    "TerminalEntryPolicy",
    # Queries
    "ReferenceCatalog",
]
