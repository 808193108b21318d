"""Fuzzy supplier name matching.

House recommended names are short canonical brands ("B-Stock") while catalog
names may carry suffixes ("B-Stock Inc."), so a name matches when either
string contains the other, case-insensitively.

Ties are NOT scored: the first catalog entry (in the order the caller passes
the catalog, ascending supplier id for the stores) wins. Callers that need a
different winner must reorder the catalog, not this function.
"""

from collections.abc import Iterable
from typing import Protocol, TypeVar


class NamedSupplier(Protocol):
    id: int
    name: str


S = TypeVar("S", bound=NamedSupplier)


def names_match(candidate: str, name: str) -> bool:
    """Bidirectional, case-insensitive substring containment."""
    a = (candidate or "").lower()
    b = (name or "").lower()
    return a in b or b in a


def match_supplier_name(candidate: str, catalog: Iterable[S]) -> S | None:
    """Resolve a human-entered supplier name to a catalog entry.

    Args:
        candidate: Name to resolve (e.g. "B-Stock").
        catalog: Suppliers in a stable order.

    Returns:
        The first supplier whose name matches, or None.
    """
    for supplier in catalog:
        if names_match(candidate, supplier.name):
            return supplier
    return None
