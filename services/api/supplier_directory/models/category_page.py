"""Category page model.

A curated landing page for a retailer/brand or merchandise category.
`supplier_ids` pins an ordered featured-supplier selection; an empty list
means "show the house recommended suppliers".
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from supplier_directory.stores.postgres import Base


class CategoryPage(Base):
    """Landing page with an optional curated supplier selection."""

    __tablename__ = "category_pages"

    id: Mapped[int] = mapped_column(primary_key=True)
    slug: Mapped[str] = mapped_column(String(200), unique=True, index=True)

    # "retailer" | "category" | other topic kinds
    topic_category: Mapped[str] = mapped_column(String(50), default="category")
    page_title: Mapped[str] = mapped_column(String(300))
    featured_suppliers_h2: Mapped[str | None] = mapped_column(String(300))

    # Ordered supplier ids; entries are written by admins and may be strings
    supplier_ids: Mapped[list] = mapped_column(JSON, default=list)

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
        return f"<CategoryPage {self.slug}>"
