"""Schemas for taxonomy list endpoints (/v1/catalog/*)."""

from pydantic import BaseModel, Field


class TaxonomyItem(BaseModel):
    """Region, category or lot size with the number of suppliers using it."""

    id: int
    slug: str
    name: str
    supplier_count: int = Field(alias="supplierCount", ge=0)

    model_config = {"populate_by_name": True}


class TaxonomyListResponse(BaseModel):
    items: list[TaxonomyItem]
