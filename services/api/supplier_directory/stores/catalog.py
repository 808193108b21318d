"""Catalog repository over PostgreSQL.

Read access (CatalogStore) for suppliers, reviews, category pages and taxonomy,
and the one write the consistency tooling needs (AdminMutator).

Catalog order is ascending supplier id everywhere: the fuzzy name matcher's
"first match wins" rule depends on it being stable.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from supplier_directory.models import (
    Category,
    CategoryPage,
    LotSize,
    Region,
    Review,
    Supplier,
    supplier_categories,
    supplier_lot_sizes,
)


@dataclass(frozen=True)
class SupplierFilters:
    """Directory filters; None means "no filter" for that field."""

    search: str | None = None
    category: str | None = None
    region: str | None = None
    lot_size: str | None = None
    verified: bool | None = None
    # Only suppliers with a positive home_rank (the homepage rail).
    home_only: bool | None = None

    @classmethod
    def from_params(
        cls,
        search: str | None = None,
        category: str | None = None,
        region: str | None = None,
        lot_size: str | None = None,
        verified: bool | None = None,
        home_only: bool | None = None,
    ) -> "SupplierFilters":
        """Build filters from raw query params, treating blank values as absent."""

        def _clean(value: str | None) -> str | None:
            if value is None:
                return None
            value = value.strip()
            return value or None

        return cls(
            search=_clean(search),
            category=_clean(category),
            region=_clean(region),
            lot_size=_clean(lot_size),
            verified=verified,
            home_only=home_only,
        )


@dataclass
class TaxonomyCount:
    """Taxonomy entry with the number of suppliers referencing it."""

    id: int
    slug: str
    name: str
    supplier_count: int


class CatalogStore(Protocol):
    """Read-only catalog access used by the engine services."""

    async def get_suppliers(self, filters: SupplierFilters | None = None) -> list[Supplier]: ...

    async def get_suppliers_by_ids(self, ids: Sequence[int]) -> list[Supplier]: ...

    async def get_supplier_by_id(self, supplier_id: int) -> Supplier | None: ...

    async def get_supplier_by_slug(self, slug: str) -> Supplier | None: ...

    async def get_related_suppliers(self, supplier: Supplier, limit: int = 4) -> list[Supplier]: ...

    async def get_reviews(self, supplier_id: int) -> list[Review]: ...

    async def get_reviews_for_suppliers(self, supplier_ids: Sequence[int]) -> dict[int, list[Review]]: ...

    async def get_category_pages(self) -> list[CategoryPage]: ...

    async def get_category_page(self, slug: str) -> CategoryPage | None: ...

    async def list_categories(self) -> list[TaxonomyCount]: ...

    async def list_regions(self) -> list[TaxonomyCount]: ...

    async def list_lot_sizes(self) -> list[TaxonomyCount]: ...


class AdminMutator(Protocol):
    """Writes issued by the catalog consistency tooling."""

    async def update_category_page_supplier_ids(self, slug: str, ordered_ids: Sequence[int]) -> bool: ...


def _with_relations(stmt):
    return stmt.options(
        selectinload(Supplier.region),
        selectinload(Supplier.categories),
        selectinload(Supplier.lot_sizes),
    )


class SqlCatalogStore:
    """CatalogStore backed by an AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_suppliers(self, filters: SupplierFilters | None = None) -> list[Supplier]:
        """All suppliers in catalog order, optionally narrowed by slug filters.

        Free-text search is not pushed down: the directory engine applies it
        over the fetched suppliers.
        """
        stmt = _with_relations(select(Supplier)).order_by(Supplier.id.asc())
        if filters is not None:
            if filters.category:
                stmt = stmt.where(Supplier.categories.any(Category.slug == filters.category))
            if filters.region:
                stmt = stmt.where(Supplier.region.has(Region.slug == filters.region))
            if filters.lot_size:
                stmt = stmt.where(Supplier.lot_sizes.any(LotSize.slug == filters.lot_size))
            if filters.verified is not None:
                stmt = stmt.where(Supplier.is_verified.is_(filters.verified))
            if filters.home_only:
                stmt = stmt.where(Supplier.home_rank > 0)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_suppliers_by_ids(self, ids: Sequence[int]) -> list[Supplier]:
        if not ids:
            return []
        stmt = _with_relations(select(Supplier)).where(Supplier.id.in_(list(ids)))
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_supplier_by_id(self, supplier_id: int) -> Supplier | None:
        stmt = _with_relations(select(Supplier)).where(Supplier.id == supplier_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_supplier_by_slug(self, slug: str) -> Supplier | None:
        stmt = _with_relations(select(Supplier)).where(Supplier.slug == slug)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_related_suppliers(self, supplier: Supplier, limit: int = 4) -> list[Supplier]:
        """Suppliers sharing at least one category, in directory order."""
        category_ids = [c.id for c in supplier.categories]
        if not category_ids:
            return []
        stmt = (
            _with_relations(select(Supplier))
            .where(Supplier.id != supplier.id)
            .where(Supplier.categories.any(Category.id.in_(category_ids)))
            .order_by(Supplier.home_rank.desc(), Supplier.id.asc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_reviews(self, supplier_id: int) -> list[Review]:
        """Approved reviews for a supplier, newest first."""
        stmt = (
            select(Review)
            .where(Review.supplier_id == supplier_id)
            .where(Review.is_approved.is_(True))
            .order_by(Review.created_at.desc(), Review.id.desc())
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_reviews_for_suppliers(self, supplier_ids: Sequence[int]) -> dict[int, list[Review]]:
        grouped: dict[int, list[Review]] = {supplier_id: [] for supplier_id in supplier_ids}
        if not supplier_ids:
            return grouped
        stmt = (
            select(Review)
            .where(Review.supplier_id.in_(list(supplier_ids)))
            .where(Review.is_approved.is_(True))
        )
        result = await self._session.execute(stmt)
        for review in result.scalars().all():
            grouped.setdefault(review.supplier_id, []).append(review)
        return grouped

    async def get_category_pages(self) -> list[CategoryPage]:
        result = await self._session.execute(select(CategoryPage).order_by(CategoryPage.id.asc()))
        return list(result.scalars().all())

    async def get_category_page(self, slug: str) -> CategoryPage | None:
        result = await self._session.execute(select(CategoryPage).where(CategoryPage.slug == slug))
        return result.scalar_one_or_none()

    async def _list_taxonomy(self, model, association, fk_column: str) -> list[TaxonomyCount]:
        fk = association.c[fk_column]
        stmt = (
            select(model.id, model.slug, model.name, func.count(association.c.supplier_id))
            .select_from(model)
            .outerjoin(association, fk == model.id)
            .group_by(model.id, model.slug, model.name)
            .order_by(model.name.asc())
        )
        result = await self._session.execute(stmt)
        return [
            TaxonomyCount(id=row[0], slug=row[1], name=row[2], supplier_count=row[3])
            for row in result.all()
        ]

    async def list_categories(self) -> list[TaxonomyCount]:
        return await self._list_taxonomy(Category, supplier_categories, "category_id")

    async def list_lot_sizes(self) -> list[TaxonomyCount]:
        return await self._list_taxonomy(LotSize, supplier_lot_sizes, "lot_size_id")

    async def list_regions(self) -> list[TaxonomyCount]:
        stmt = (
            select(Region.id, Region.slug, Region.name, func.count(Supplier.id))
            .select_from(Region)
            .outerjoin(Supplier, Supplier.region_id == Region.id)
            .group_by(Region.id, Region.slug, Region.name)
            .order_by(Region.name.asc())
        )
        result = await self._session.execute(stmt)
        return [
            TaxonomyCount(id=row[0], slug=row[1], name=row[2], supplier_count=row[3])
            for row in result.all()
        ]


class SqlAdminMutator:
    """AdminMutator backed by an AsyncSession.

    Each update is committed on its own so an aborted run leaves every page
    either fully updated or untouched.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def update_category_page_supplier_ids(self, slug: str, ordered_ids: Sequence[int]) -> bool:
        result = await self._session.execute(
            update(CategoryPage)
            .where(CategoryPage.slug == slug)
            .values(supplier_ids=list(ordered_ids))
        )
        await self._session.commit()
        return (result.rowcount or 0) > 0
