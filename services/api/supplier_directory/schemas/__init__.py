"""Pydantic schemas for API request/response validation."""

from supplier_directory.schemas.catalog import TaxonomyItem, TaxonomyListResponse
from supplier_directory.schemas.common import ErrorDetail, ErrorResponse, error_response
from supplier_directory.schemas.suppliers import (
    AspectAverages,
    CategoryPageSuppliersResponse,
    FeaturedSuppliersResponse,
    RecentReview,
    ReviewSummaryOut,
    StarDistribution,
    SupplierDetailResponse,
    SupplierListResponse,
    SupplierSummary,
    TaxonomyRef,
)

__all__ = [
    "AspectAverages",
    "CategoryPageSuppliersResponse",
    "ErrorDetail",
    "ErrorResponse",
    "FeaturedSuppliersResponse",
    "RecentReview",
    "ReviewSummaryOut",
    "StarDistribution",
    "SupplierDetailResponse",
    "SupplierListResponse",
    "SupplierSummary",
    "TaxonomyItem",
    "TaxonomyListResponse",
    "TaxonomyRef",
    "error_response",
]
