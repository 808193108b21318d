"""Supplier profile service (GET /v1/suppliers/{slug})."""

from supplier_directory.schemas import RecentReview, SupplierDetailResponse
from supplier_directory.services.directory import summarize_cards, to_supplier_summary
from supplier_directory.services.reviews import summarize_reviews, to_review_summary_out
from supplier_directory.stores.catalog import CatalogStore

RECENT_REVIEWS_LIMIT = 4
RELATED_SUPPLIERS_LIMIT = 4


async def get_supplier_profile(store: CatalogStore, slug: str) -> SupplierDetailResponse | None:
    """Get a supplier profile with review summary, recent reviews and related suppliers.

    Args:
        store: Catalog store.
        slug: Supplier slug.

    Returns:
        SupplierDetailResponse, or None when no supplier has that slug.
    """
    supplier = await store.get_supplier_by_slug(slug)
    if supplier is None:
        return None

    reviews = await store.get_reviews(supplier.id)
    summary = summarize_reviews(reviews)
    related = await store.get_related_suppliers(supplier, limit=RELATED_SUPPLIERS_LIMIT)

    return SupplierDetailResponse(
        supplier=to_supplier_summary(supplier, summary),
        description=supplier.description,
        website=supplier.website,
        review_summary=to_review_summary_out(summary),
        recent_reviews=[
            RecentReview(
                author=review.author,
                rating_overall=review.rating_overall,
                body=review.body,
                published_at=review.approved_at or review.created_at,
            )
            for review in reviews[:RECENT_REVIEWS_LIMIT]
        ],
        related_suppliers=await summarize_cards(store, related),
    )
