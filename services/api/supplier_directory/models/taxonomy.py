"""Taxonomy models: regions, categories and lot sizes.

Suppliers reference these by slug in directory filters
(e.g. /v1/suppliers?category=electronics&region=midwest&lotSize=truckload).
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from supplier_directory.stores.postgres import Base


class Region(Base):
    """Geographic region a supplier operates from."""

    __tablename__ = "regions"

    id: Mapped[int] = mapped_column(primary_key=True)
    slug: Mapped[str] = mapped_column(String(120), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(200))
    headline: Mapped[str | None] = mapped_column(String(300))
    description: Mapped[str | None] = mapped_column(Text)
    state_code: Mapped[str | None] = mapped_column(String(10))

    def __repr__(self) -> str:
        return f"<Region {self.slug}>"


class Category(Base):
    """Merchandise category (e.g. electronics, apparel, general merchandise)."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    slug: Mapped[str] = mapped_column(String(120), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(200))
    headline: Mapped[str | None] = mapped_column(String(300))
    description: Mapped[str | None] = mapped_column(Text)
    icon: Mapped[str | None] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"<Category {self.slug}>"


class LotSize(Base):
    """Lot size bucket (e.g. case packs, pallets, truckloads)."""

    __tablename__ = "lot_sizes"

    id: Mapped[int] = mapped_column(primary_key=True)
    slug: Mapped[str] = mapped_column(String(120), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<LotSize {self.slug}>"
