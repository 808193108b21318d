"""In-memory catalog used by the tests.

Models are plain transient ORM instances (never added to a session), served
by FakeCatalogStore / FakeAdminMutator which follow the same contracts as the
SQL implementations.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, timezone

from supplier_directory.models import Category, CategoryPage, LotSize, Region, Review, Supplier
from supplier_directory.services.directory import sort_key
from supplier_directory.stores.catalog import SupplierFilters, TaxonomyCount

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_supplier(
    id: int,
    name: str,
    *,
    home_rank: int = 0,
    is_verified: bool = False,
    region: Region | None = None,
    categories: Sequence[Category] = (),
    lot_sizes: Sequence[LotSize] = (),
    keywords: Sequence[str] = (),
    badges: Sequence[str] = (),
    short_description: str | None = None,
) -> Supplier:
    return Supplier(
        id=id,
        name=name,
        slug=name.lower().replace(" ", "-").replace(".", "-"),
        short_description=short_description,
        description=f"{name} sells liquidation inventory.",
        website=None,
        logo_image=None,
        hero_image=None,
        keywords=list(keywords),
        badges=list(badges),
        trust_score=50,
        home_rank=home_rank,
        is_verified=is_verified,
        is_scam=False,
        region=region,
        region_id=region.id if region else None,
        categories=list(categories),
        lot_sizes=list(lot_sizes),
    )


def make_review(
    id: int,
    supplier_id: int,
    rating: int,
    *,
    accuracy: int | None = None,
    logistics: int | None = None,
    value: int | None = None,
    communication: int | None = None,
    approved: bool = True,
    age_days: int = 0,
) -> Review:
    created = BASE_TIME - timedelta(days=age_days)
    return Review(
        id=id,
        supplier_id=supplier_id,
        author=f"buyer-{id}",
        body="Pallets arrived as manifested.",
        rating_overall=rating,
        rating_accuracy=accuracy,
        rating_logistics=logistics,
        rating_value=value,
        rating_communication=communication,
        is_approved=approved,
        approved_at=created if approved else None,
        created_at=created,
    )


def make_page(id: int, slug: str, supplier_ids: list, topic_category: str = "category") -> CategoryPage:
    return CategoryPage(
        id=id,
        slug=slug,
        topic_category=topic_category,
        page_title=f"{slug} liquidation suppliers",
        featured_suppliers_h2=None,
        supplier_ids=list(supplier_ids),
    )


class FakeCatalogStore:
    """CatalogStore over in-memory lists."""

    def __init__(
        self,
        suppliers: Iterable[Supplier] = (),
        reviews: Iterable[Review] = (),
        pages: Iterable[CategoryPage] = (),
    ) -> None:
        self.suppliers = sorted(suppliers, key=lambda s: s.id)
        self.reviews = list(reviews)
        self.pages = sorted(pages, key=lambda p: p.id)

    async def get_suppliers(self, filters: SupplierFilters | None = None) -> list[Supplier]:
        # Same pushdown as SqlCatalogStore.get_suppliers: slug filters, verified
        # and home_only narrow the rows; search is left to the engine.
        suppliers = list(self.suppliers)
        if filters is None:
            return suppliers
        if filters.category:
            suppliers = [s for s in suppliers if any(c.slug == filters.category for c in s.categories)]
        if filters.region:
            suppliers = [s for s in suppliers if s.region is not None and s.region.slug == filters.region]
        if filters.lot_size:
            suppliers = [s for s in suppliers if any(ls.slug == filters.lot_size for ls in s.lot_sizes)]
        if filters.verified is not None:
            suppliers = [s for s in suppliers if s.is_verified is filters.verified]
        if filters.home_only:
            suppliers = [s for s in suppliers if s.home_rank > 0]
        return suppliers

    async def get_suppliers_by_ids(self, ids: Sequence[int]) -> list[Supplier]:
        # Unordered like an SQL IN query: callers must restore the requested order.
        wanted = set(ids)
        return [s for s in reversed(self.suppliers) if s.id in wanted]

    async def get_supplier_by_id(self, supplier_id: int) -> Supplier | None:
        return next((s for s in self.suppliers if s.id == supplier_id), None)

    async def get_supplier_by_slug(self, slug: str) -> Supplier | None:
        return next((s for s in self.suppliers if s.slug == slug), None)

    async def get_related_suppliers(self, supplier: Supplier, limit: int = 4) -> list[Supplier]:
        category_ids = {c.id for c in supplier.categories}
        related = [
            s
            for s in self.suppliers
            if s.id != supplier.id and category_ids & {c.id for c in s.categories}
        ]
        return sorted(related, key=sort_key)[:limit]

    async def get_reviews(self, supplier_id: int) -> list[Review]:
        approved = [r for r in self.reviews if r.supplier_id == supplier_id and r.is_approved]
        return sorted(approved, key=lambda r: (r.created_at, r.id), reverse=True)

    async def get_reviews_for_suppliers(self, supplier_ids: Sequence[int]) -> dict[int, list[Review]]:
        grouped: dict[int, list[Review]] = {supplier_id: [] for supplier_id in supplier_ids}
        for review in self.reviews:
            if review.is_approved and review.supplier_id in grouped:
                grouped[review.supplier_id].append(review)
        return grouped

    async def get_category_pages(self) -> list[CategoryPage]:
        return list(self.pages)

    async def get_category_page(self, slug: str) -> CategoryPage | None:
        return next((p for p in self.pages if p.slug == slug), None)

    def _count(self, items: Iterable, key) -> list[TaxonomyCount]:
        counts: dict[int, TaxonomyCount] = {}
        for item in items:
            counts[item.id] = TaxonomyCount(id=item.id, slug=item.slug, name=item.name, supplier_count=0)
        for supplier in self.suppliers:
            for item in key(supplier):
                counts[item.id].supplier_count += 1
        return sorted(counts.values(), key=lambda t: t.name)

    async def list_categories(self) -> list[TaxonomyCount]:
        items = {c.id: c for s in self.suppliers for c in s.categories}
        return self._count(items.values(), lambda s: s.categories)

    async def list_regions(self) -> list[TaxonomyCount]:
        items = {s.region.id: s.region for s in self.suppliers if s.region}
        return self._count(items.values(), lambda s: [s.region] if s.region else [])

    async def list_lot_sizes(self) -> list[TaxonomyCount]:
        items = {ls.id: ls for s in self.suppliers for ls in s.lot_sizes}
        return self._count(items.values(), lambda s: s.lot_sizes)


class FakeAdminMutator:
    """AdminMutator writing into a FakeCatalogStore's pages."""

    def __init__(self, store: FakeCatalogStore, fail_slugs: Iterable[str] = ()) -> None:
        self.store = store
        self.fail_slugs = set(fail_slugs)
        self.calls: list[tuple[str, list[int]]] = []

    async def update_category_page_supplier_ids(self, slug: str, ordered_ids: Sequence[int]) -> bool:
        self.calls.append((slug, list(ordered_ids)))
        if slug in self.fail_slugs:
            return False
        page = next((p for p in self.store.pages if p.slug == slug), None)
        if page is None:
            return False
        page.supplier_ids = list(ordered_ids)
        return True


def build_catalog() -> FakeCatalogStore:
    """A small directory: six suppliers, reviews for two of them, three pages."""
    midwest = Region(id=1, slug="midwest", name="Midwest")
    west = Region(id=2, slug="west-coast", name="West Coast")

    electronics = Category(id=1, slug="electronics", name="Electronics")
    apparel = Category(id=2, slug="apparel", name="Apparel")
    general = Category(id=3, slug="general-merchandise", name="General Merchandise")

    pallet = LotSize(id=1, slug="pallet", name="Pallet")
    truckload = LotSize(id=2, slug="truckload", name="Truckload")

    suppliers = [
        make_supplier(
            1,
            "B-Stock Solutions",
            home_rank=90,
            is_verified=True,
            region=midwest,
            categories=[electronics, general],
            lot_sizes=[pallet, truckload],
            keywords=["amazon returns", "retail returns"],
            badges=["Top Rated"],
            short_description="B2B marketplace for retailer returns",
        ),
        make_supplier(
            2,
            "Liquidation.com",
            home_rank=80,
            is_verified=True,
            region=west,
            categories=[general],
            lot_sizes=[pallet],
            short_description="Online auctions for surplus",
        ),
        make_supplier(
            3,
            "Select Liquidation",
            home_rank=80,
            region=midwest,
            categories=[apparel],
            lot_sizes=[truckload],
        ),
        make_supplier(
            4,
            "Direct Liquidation",
            home_rank=70,
            is_verified=True,
            region=west,
            categories=[electronics],
            lot_sizes=[pallet],
            badges=["Manifested"],
        ),
        make_supplier(
            5,
            "Via Trading",
            home_rank=50,
            region=west,
            categories=[apparel, general],
            lot_sizes=[pallet],
        ),
        make_supplier(6, "Bulq", home_rank=0),
    ]

    reviews = [
        make_review(1, 1, 5, accuracy=5, logistics=4, age_days=1),
        make_review(2, 1, 4, accuracy=3, age_days=3),
        make_review(3, 1, 3, age_days=2),
        make_review(4, 1, 1, approved=False),
        make_review(5, 2, 4),
        make_review(6, 2, 5),
    ]

    pages = [
        make_page(1, "amazon-returns", ["4", 2, "bogus", 2, 999], topic_category="retailer"),
        make_page(2, "electronics", []),
        make_page(3, "apparel", [5, 3]),
    ]

    return FakeCatalogStore(suppliers=suppliers, reviews=reviews, pages=pages)
