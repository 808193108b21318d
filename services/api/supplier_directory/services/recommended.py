"""Featured supplier resolution for category pages.

Rules:
1. Curated page (non-empty supplier_ids): parse ids to ints, drop unparseable
   values and duplicates (first occurrence wins), keep that exact order. Ids
   without a supplier are dropped silently.
2. Uncurated page (empty supplier_ids): walk the recommended supplier names in
   their configured order, resolve each with the fuzzy matcher against the
   full catalog, keep successful matches in that order.

An empty result is valid (the page renders "no featured suppliers").
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from supplier_directory.models import CategoryPage, Supplier
from supplier_directory.services.matching import match_supplier_name
from supplier_directory.stores.catalog import CatalogStore

logger = logging.getLogger("uvicorn.error")

SelectionSource = Literal["curated", "recommended"]


@dataclass
class FeaturedSelection:
    """Resolved featured suppliers for one category page."""

    source: SelectionSource
    suppliers: list[Supplier]


def parse_supplier_id(value: Any) -> int | None:
    """Normalize one configured supplier id, or None if it does not parse.

    Accepts ints, integral floats and numeric strings ("12", " 12 ", "12.0").
    Booleans are rejected even though they are ints in Python.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        try:
            return int(s)
        except ValueError:
            pass
        try:
            f = float(s)
        except ValueError:
            return None
        return int(f) if f.is_integer() else None
    return None


def parse_supplier_ids(raw_ids: Iterable[Any] | None) -> list[int]:
    """Parse configured ids, dropping invalid values and later duplicates."""
    seen: set[int] = set()
    ids: list[int] = []
    for raw in raw_ids or []:
        parsed = parse_supplier_id(raw)
        if parsed is None or parsed in seen:
            continue
        seen.add(parsed)
        ids.append(parsed)
    return ids


def order_by_ids(ids: Sequence[int], suppliers: Iterable[Supplier]) -> list[Supplier]:
    """Return suppliers in the order of `ids`, skipping ids with no supplier."""
    by_id: dict[int, Supplier] = {}
    for supplier in suppliers:
        by_id.setdefault(supplier.id, supplier)
    return [by_id[i] for i in ids if i in by_id]


def resolve_recommended_names(
    names: Sequence[str],
    catalog: Sequence[Supplier],
) -> list[Supplier]:
    """Resolve recommended names against the catalog, keeping name order."""
    resolved: list[Supplier] = []
    for name in names:
        supplier = match_supplier_name(name, catalog)
        if supplier is not None:
            resolved.append(supplier)
    return resolved


def resolve_featured_suppliers(
    configured_ids: Sequence[Any] | None,
    catalog: Sequence[Supplier],
    recommended_names: Sequence[str],
) -> FeaturedSelection:
    """Pure resolution of a page's featured suppliers.

    Args:
        configured_ids: The page's supplier_ids (may be empty or None).
        catalog: Suppliers to resolve against, in stable catalog order.
            For curated pages any superset of the configured ids works.
        recommended_names: House recommended supplier names, in display order.

    Returns:
        FeaturedSelection with the ordered suppliers and which rule produced them.
    """
    if configured_ids:
        return FeaturedSelection(
            source="curated",
            suppliers=order_by_ids(parse_supplier_ids(configured_ids), catalog),
        )
    return FeaturedSelection(
        source="recommended",
        suppliers=resolve_recommended_names(recommended_names, catalog),
    )


async def resolve_category_page_suppliers(
    store: CatalogStore,
    page: CategoryPage,
    recommended_names: Sequence[str],
) -> FeaturedSelection:
    """Fetch what the page needs from the store and resolve its suppliers."""
    configured = list(page.supplier_ids or [])
    if configured:
        ids = parse_supplier_ids(configured)
        catalog = await store.get_suppliers_by_ids(ids) if ids else []
    else:
        catalog = await store.get_suppliers()

    selection = resolve_featured_suppliers(configured, catalog, recommended_names)

    expected = len(parse_supplier_ids(configured)) if configured else len(recommended_names)
    if len(selection.suppliers) < expected:
        logger.info(
            "[featured] page=%s source=%s resolved=%s/%s",
            page.slug,
            selection.source,
            len(selection.suppliers),
            expected,
        )
    return selection
