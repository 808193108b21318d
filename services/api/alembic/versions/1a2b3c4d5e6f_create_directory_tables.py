"""create_directory_tables

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-17
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "1a2b3c4d5e6f"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False)


def upgrade() -> None:
    op.create_table(
        "regions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(length=120), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("headline", sa.String(length=300), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("state_code", sa.String(length=10), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_regions_slug"), "regions", ["slug"], unique=True)

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(length=120), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("headline", sa.String(length=300), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_categories_slug"), "categories", ["slug"], unique=True)

    op.create_table(
        "lot_sizes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(length=120), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_lot_sizes_slug"), "lot_sizes", ["slug"], unique=True)

    op.create_table(
        "suppliers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("slug", sa.String(length=200), nullable=False),
        sa.Column("short_description", sa.String(length=500), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("website", sa.String(length=500), nullable=True),
        sa.Column("logo_image", sa.Text(), nullable=True),
        sa.Column("hero_image", sa.Text(), nullable=True),
        sa.Column("keywords", sa.JSON(), nullable=False),
        sa.Column("badges", sa.JSON(), nullable=False),
        sa.Column("trust_score", sa.Integer(), nullable=False),
        sa.Column("home_rank", sa.Integer(), nullable=False),
        sa.Column("is_verified", sa.Boolean(), nullable=False),
        sa.Column("is_scam", sa.Boolean(), nullable=False),
        sa.Column("region_id", sa.Integer(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["region_id"], ["regions.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_suppliers_name"), "suppliers", ["name"], unique=False)
    op.create_index(op.f("ix_suppliers_slug"), "suppliers", ["slug"], unique=True)
    op.create_index(op.f("ix_suppliers_home_rank"), "suppliers", ["home_rank"], unique=False)
    op.create_index(op.f("ix_suppliers_region_id"), "suppliers", ["region_id"], unique=False)

    op.create_table(
        "supplier_categories",
        sa.Column("supplier_id", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["supplier_id"], ["suppliers.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("supplier_id", "category_id"),
    )

    op.create_table(
        "supplier_lot_sizes",
        sa.Column("supplier_id", sa.Integer(), nullable=False),
        sa.Column("lot_size_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["supplier_id"], ["suppliers.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["lot_size_id"], ["lot_sizes.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("supplier_id", "lot_size_id"),
    )

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("supplier_id", sa.Integer(), nullable=False),
        sa.Column("author", sa.String(length=200), nullable=False),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("rating_overall", sa.Integer(), nullable=False),
        sa.Column("rating_accuracy", sa.Integer(), nullable=True),
        sa.Column("rating_logistics", sa.Integer(), nullable=True),
        sa.Column("rating_value", sa.Integer(), nullable=True),
        sa.Column("rating_communication", sa.Integer(), nullable=True),
        sa.Column("is_approved", sa.Boolean(), nullable=False),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["supplier_id"], ["suppliers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_reviews_supplier_id"), "reviews", ["supplier_id"], unique=False)
    op.create_index(op.f("ix_reviews_is_approved"), "reviews", ["is_approved"], unique=False)

    op.create_table(
        "category_pages",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(length=200), nullable=False),
        sa.Column("topic_category", sa.String(length=50), nullable=False),
        sa.Column("page_title", sa.String(length=300), nullable=False),
        sa.Column("featured_suppliers_h2", sa.String(length=300), nullable=True),
        sa.Column("supplier_ids", sa.JSON(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_category_pages_slug"), "category_pages", ["slug"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_category_pages_slug"), table_name="category_pages")
    op.drop_table("category_pages")

    op.drop_index(op.f("ix_reviews_is_approved"), table_name="reviews")
    op.drop_index(op.f("ix_reviews_supplier_id"), table_name="reviews")
    op.drop_table("reviews")

    op.drop_table("supplier_lot_sizes")
    op.drop_table("supplier_categories")

    op.drop_index(op.f("ix_suppliers_region_id"), table_name="suppliers")
    op.drop_index(op.f("ix_suppliers_home_rank"), table_name="suppliers")
    op.drop_index(op.f("ix_suppliers_slug"), table_name="suppliers")
    op.drop_index(op.f("ix_suppliers_name"), table_name="suppliers")
    op.drop_table("suppliers")

    op.drop_index(op.f("ix_lot_sizes_slug"), table_name="lot_sizes")
    op.drop_table("lot_sizes")
    op.drop_index(op.f("ix_categories_slug"), table_name="categories")
    op.drop_table("categories")
    op.drop_index(op.f("ix_regions_slug"), table_name="regions")
    op.drop_table("regions")
