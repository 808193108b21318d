"""Directory listing service.

Ordering (stable, deterministic for a fixed filter set):
1. home_rank DESC (more prominent suppliers first)
2. id ASC (tiebreaker)

Pagination is keyset-based: the cursor is the id of the last supplier on the
previous page. It is resolved to that supplier's (home_rank, id) sort key and
the next page starts strictly after it, so suppliers inserted elsewhere in the
catalog between requests cannot shift pages. An id that no longer exists
yields an empty page.

Filters are set-membership predicates: an unknown slug matches nothing rather
than raising.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from supplier_directory.models import Supplier
from supplier_directory.schemas import SupplierListResponse, SupplierSummary, TaxonomyRef
from supplier_directory.services.reviews import ReviewSummary, summarize_reviews
from supplier_directory.stores.catalog import CatalogStore, SupplierFilters

logger = logging.getLogger("uvicorn.error")

SortKey = tuple[int, int]


@dataclass
class DirectoryPage:
    """One page of directory results."""

    items: list[Supplier]
    next_cursor: int | None
    total: int


def sort_key(supplier: Supplier) -> SortKey:
    """Directory sort key: home_rank DESC, id ASC."""
    return (-(supplier.home_rank or 0), supplier.id)


def _search_fields(supplier: Supplier) -> Iterable[str]:
    yield supplier.name or ""
    yield supplier.short_description or ""
    yield from supplier.keywords or []
    yield from supplier.badges or []


def matches_search(supplier: Supplier, search: str) -> bool:
    needle = search.lower()
    return any(needle in str(value).lower() for value in _search_fields(supplier))


def matches_filters(supplier: Supplier, filters: SupplierFilters) -> bool:
    """Whether a supplier satisfies every active filter."""
    if filters.search and not matches_search(supplier, filters.search):
        return False
    if filters.category and not any(c.slug == filters.category for c in supplier.categories or []):
        return False
    if filters.region and (supplier.region is None or supplier.region.slug != filters.region):
        return False
    if filters.lot_size and not any(ls.slug == filters.lot_size for ls in supplier.lot_sizes or []):
        return False
    if filters.verified is not None and bool(supplier.is_verified) != filters.verified:
        return False
    if filters.home_only and (supplier.home_rank or 0) <= 0:
        return False
    return True


def paginate_suppliers(
    suppliers: Iterable[Supplier],
    filters: SupplierFilters,
    *,
    after: SortKey | None,
    limit: int,
) -> DirectoryPage:
    """Filter, order and slice suppliers into one page.

    Args:
        suppliers: Candidate suppliers (any order, unique ids).
        filters: Active filters.
        after: Sort key of the last supplier already served, or None for page one.
        limit: Page size (values below 1 are treated as 1).

    Returns:
        DirectoryPage; next_cursor is None when this page reaches the end.
    """
    limit = max(1, limit)
    matched = sorted((s for s in suppliers if matches_filters(s, filters)), key=sort_key)

    remaining = matched if after is None else [s for s in matched if sort_key(s) > after]
    window = remaining[: limit + 1]
    items = window[:limit]
    next_cursor = items[-1].id if len(window) > limit else None

    return DirectoryPage(items=items, next_cursor=next_cursor, total=len(matched))


async def list_directory(
    store: CatalogStore,
    filters: SupplierFilters,
    *,
    cursor: int | None,
    limit: int,
) -> DirectoryPage:
    """Answer a directory listing request from the catalog store."""
    suppliers = await store.get_suppliers(filters)

    after: SortKey | None = None
    if cursor is not None:
        boundary = await store.get_supplier_by_id(cursor)
        if boundary is None:
            logger.info("[directory] unknown cursor=%s, returning empty page", cursor)
            total = sum(1 for s in suppliers if matches_filters(s, filters))
            return DirectoryPage(items=[], next_cursor=None, total=total)
        after = sort_key(boundary)

    return paginate_suppliers(suppliers, filters, after=after, limit=limit)


def _refs(items: Iterable) -> list[TaxonomyRef]:
    return [TaxonomyRef(slug=item.slug, name=item.name) for item in items or []]


def to_supplier_summary(
    supplier: Supplier,
    reviews: ReviewSummary | None = None,
) -> SupplierSummary:
    """Convert a Supplier (+ optional review summary) to its card schema."""
    rating_average = None
    rating_count = 0
    if reviews is not None:
        rating_count = reviews.count
        if reviews.average is not None:
            rating_average = round(reviews.average, 1)

    return SupplierSummary(
        id=supplier.id,
        slug=supplier.slug,
        name=supplier.name,
        short_description=supplier.short_description,
        logo_image=supplier.logo_image,
        hero_image=supplier.hero_image,
        is_verified=bool(supplier.is_verified),
        is_scam=bool(supplier.is_scam),
        trust_score=supplier.trust_score or 0,
        home_rank=supplier.home_rank or 0,
        badges=list(supplier.badges or []),
        region=TaxonomyRef(slug=supplier.region.slug, name=supplier.region.name) if supplier.region else None,
        categories=_refs(supplier.categories),
        lot_sizes=_refs(supplier.lot_sizes),
        rating_average=rating_average,
        rating_count=rating_count,
    )


async def summarize_cards(store: CatalogStore, suppliers: Sequence[Supplier]) -> list[SupplierSummary]:
    """Build supplier cards with rating stats for a list of suppliers."""
    reviews_by_supplier = await store.get_reviews_for_suppliers([s.id for s in suppliers])
    return [
        to_supplier_summary(s, summarize_reviews(reviews_by_supplier.get(s.id, [])))
        for s in suppliers
    ]


async def get_supplier_list(
    store: CatalogStore,
    filters: SupplierFilters,
    *,
    cursor: int | None,
    limit: int,
) -> SupplierListResponse:
    """Directory listing payload for GET /v1/suppliers."""
    page = await list_directory(store, filters, cursor=cursor, limit=limit)
    return SupplierListResponse(
        items=await summarize_cards(store, page.items),
        next_cursor=page.next_cursor,
        total=page.total,
    )


async def get_featured_suppliers(store: CatalogStore, limit: int = 4) -> list[SupplierSummary]:
    """Homepage featured rail: the first `limit` suppliers with a positive home_rank."""
    page = await list_directory(store, SupplierFilters(home_only=True), cursor=None, limit=limit)
    return await summarize_cards(store, page.items)
