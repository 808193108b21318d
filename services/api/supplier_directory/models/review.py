"""Review model.

A buyer review of one supplier. `rating_overall` is an integer 1-5; the four
aspect ratings are optional. Only approved reviews are shown or aggregated.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from supplier_directory.stores.postgres import Base


class Review(Base):
    """Buyer review of a supplier."""

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(primary_key=True)
    supplier_id: Mapped[int] = mapped_column(
        ForeignKey("suppliers.id", ondelete="CASCADE"),
        index=True,
    )

    author: Mapped[str] = mapped_column(String(200))
    body: Mapped[str | None] = mapped_column(Text)

    # Ratings (1-5)
    rating_overall: Mapped[int] = mapped_column()
    rating_accuracy: Mapped[int | None] = mapped_column()
    rating_logistics: Mapped[int | None] = mapped_column()
    rating_value: Mapped[int | None] = mapped_column()
    rating_communication: Mapped[int | None] = mapped_column()

    # Moderation
    is_approved: Mapped[bool] = mapped_column(default=False, index=True)
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Review {self.id} supplier={self.supplier_id} {self.rating_overall}*>"
