"""Schemas for supplier listing, profile and featured-supplier endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class TaxonomyRef(BaseModel):
    """Slug + display name of a region/category/lot size."""

    slug: str
    name: str


class SupplierSummary(BaseModel):
    """Supplier card as rendered in listings and carousels."""

    id: int
    slug: str
    name: str
    short_description: str | None = Field(alias="shortDescription", default=None)
    logo_image: str | None = Field(alias="logoImage", default=None)
    hero_image: str | None = Field(alias="heroImage", default=None)
    is_verified: bool = Field(alias="isVerified", default=False)
    is_scam: bool = Field(alias="isScam", default=False)
    trust_score: int = Field(alias="trustScore", ge=0, le=100, default=0)
    home_rank: int = Field(alias="homeRank", default=0)
    badges: list[str] = Field(default_factory=list)
    region: TaxonomyRef | None = None
    categories: list[TaxonomyRef] = Field(default_factory=list)
    lot_sizes: list[TaxonomyRef] = Field(alias="lotSizes", default_factory=list)
    rating_average: float | None = Field(alias="ratingAverage", default=None)
    rating_count: int = Field(alias="ratingCount", ge=0, default=0)

    model_config = {"populate_by_name": True}


class SupplierListResponse(BaseModel):
    """Response payload for GET /v1/suppliers."""

    items: list[SupplierSummary]
    next_cursor: int | None = Field(alias="nextCursor", default=None)
    total: int = Field(ge=0)

    model_config = {"populate_by_name": True}


class FeaturedSuppliersResponse(BaseModel):
    """Response payload for GET /v1/suppliers/featured."""

    items: list[SupplierSummary]


class StarDistribution(BaseModel):
    """Review counts per star value."""

    one_star: int = Field(alias="oneStar", default=0)
    two_star: int = Field(alias="twoStar", default=0)
    three_star: int = Field(alias="threeStar", default=0)
    four_star: int = Field(alias="fourStar", default=0)
    five_star: int = Field(alias="fiveStar", default=0)

    model_config = {"populate_by_name": True}


class AspectAverages(BaseModel):
    """Per-aspect averages; None when no review rated the aspect."""

    accuracy: float | None = None
    logistics: float | None = None
    value: float | None = None
    communication: float | None = None


class ReviewSummaryOut(BaseModel):
    """Aggregated review statistics for a supplier."""

    average: float | None = None
    count: int = Field(ge=0)
    distribution: StarDistribution
    aspects: AspectAverages


class RecentReview(BaseModel):
    """A single approved review shown on the supplier profile."""

    author: str
    rating_overall: int = Field(alias="ratingOverall", ge=1, le=5)
    body: str | None = None
    published_at: datetime | None = Field(alias="publishedAt", default=None)

    model_config = {"populate_by_name": True}


class SupplierDetailResponse(BaseModel):
    """Response payload for GET /v1/suppliers/{slug}."""

    supplier: SupplierSummary
    description: str | None = None
    website: str | None = None
    review_summary: ReviewSummaryOut = Field(alias="reviewSummary")
    recent_reviews: list[RecentReview] = Field(alias="recentReviews", default_factory=list)
    related_suppliers: list[SupplierSummary] = Field(alias="relatedSuppliers", default_factory=list)

    model_config = {"populate_by_name": True}


class CategoryPageSuppliersResponse(BaseModel):
    """Response payload for GET /v1/category-pages/{slug}/suppliers.

    `source` tells whether the page's curated ids or the house recommended
    set produced the list.
    """

    slug: str
    topic_category: str = Field(alias="topicCategory")
    source: Literal["curated", "recommended"]
    suppliers: list[SupplierSummary]

    model_config = {"populate_by_name": True}
