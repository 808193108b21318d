"""Supplier model.

Represents a liquidation/wholesale supplier listed in the directory, with its
region, categories and lot sizes. `home_rank` controls prominence: higher
ranks are listed first.
"""

from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Table, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from supplier_directory.models.taxonomy import Category, LotSize, Region
from supplier_directory.stores.postgres import Base

supplier_categories = Table(
    "supplier_categories",
    Base.metadata,
    Column("supplier_id", ForeignKey("suppliers.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)

supplier_lot_sizes = Table(
    "supplier_lot_sizes",
    Base.metadata,
    Column("supplier_id", ForeignKey("suppliers.id", ondelete="CASCADE"), primary_key=True),
    Column("lot_size_id", ForeignKey("lot_sizes.id", ondelete="CASCADE"), primary_key=True),
)


class Supplier(Base):
    """Directory supplier."""

    __tablename__ = "suppliers"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Identification
    name: Mapped[str] = mapped_column(String(200), index=True)
    slug: Mapped[str] = mapped_column(String(200), unique=True, index=True)

    # Profile content
    short_description: Mapped[str | None] = mapped_column(String(500))
    description: Mapped[str | None] = mapped_column(Text)
    website: Mapped[str | None] = mapped_column(String(500))
    logo_image: Mapped[str | None] = mapped_column(Text)
    hero_image: Mapped[str | None] = mapped_column(Text)

    # Searchable tags (JSON arrays of strings)
    keywords: Mapped[list[str]] = mapped_column(JSON, default=list)
    badges: Mapped[list[str]] = mapped_column(JSON, default=list)

    # Ranking & trust
    trust_score: Mapped[int] = mapped_column(default=0)  # 0-100
    home_rank: Mapped[int] = mapped_column(default=0, index=True)
    is_verified: Mapped[bool] = mapped_column(default=False)
    is_scam: Mapped[bool] = mapped_column(default=False)

    # Relations
    region_id: Mapped[int | None] = mapped_column(ForeignKey("regions.id"), index=True)
    region: Mapped[Region | None] = relationship()
    categories: Mapped[list[Category]] = relationship(secondary=supplier_categories)
    lot_sizes: Mapped[list[LotSize]] = relationship(secondary=supplier_lot_sizes)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Supplier {self.id} {self.name}>"
