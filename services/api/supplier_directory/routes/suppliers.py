"""Supplier directory endpoints.

GET /v1/suppliers          - Filtered, cursor-paginated listing.
GET /v1/suppliers/featured - Homepage featured rail (homeRank > 0).
GET /v1/suppliers/{slug}   - Supplier profile with review summary.

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from supplier_directory.dependencies import get_catalog_store
from supplier_directory.schemas import (
    FeaturedSuppliersResponse,
    SupplierDetailResponse,
    SupplierListResponse,
)
from supplier_directory.services.directory import get_featured_suppliers, get_supplier_list
from supplier_directory.services.profiles import get_supplier_profile
from supplier_directory.settings import get_settings
from supplier_directory.stores.catalog import CatalogStore, SupplierFilters

router = APIRouter()


@router.get("", response_model=SupplierListResponse, response_model_by_alias=True)
async def list_suppliers(
    search: str | None = Query(default=None, description="Case-insensitive text search", max_length=200),
    category: str | None = Query(default=None, description="Category slug", examples=["electronics"]),
    region: str | None = Query(default=None, description="Region slug", examples=["midwest"]),
    lot_size: str | None = Query(default=None, alias="lotSize", description="Lot size slug", examples=["pallet"]),
    verified: bool | None = Query(default=None, description="Only verified (true) or unverified (false) suppliers"),
    home_only: bool | None = Query(default=None, alias="homeOnly", description="Only suppliers featured on the homepage"),
    cursor: int | None = Query(default=None, description="nextCursor from the previous page"),
    limit: int | None = Query(default=None, ge=1, description="Page size"),
    store: CatalogStore = Depends(get_catalog_store),
) -> SupplierListResponse:
    """List suppliers ordered by homeRank DESC, id ASC.

    Returns:
        SupplierListResponse with items, nextCursor (null on the last page) and total.
    """
    settings = get_settings()
    page_size = min(limit or settings.directory_default_limit, settings.directory_max_limit)

    filters = SupplierFilters.from_params(
        search=search,
        category=category,
        region=region,
        lot_size=lot_size,
        verified=verified,
        home_only=home_only,
    )
    return await get_supplier_list(store, filters, cursor=cursor, limit=page_size)


@router.get("/featured", response_model=FeaturedSuppliersResponse, response_model_by_alias=True)
async def list_featured_suppliers(
    limit: int = Query(default=4, ge=1, description="Number of suppliers"),
    store: CatalogStore = Depends(get_catalog_store),
) -> FeaturedSuppliersResponse:
    """Featured suppliers for the homepage rail, in directory order."""
    limit = min(limit, get_settings().directory_max_limit)
    return FeaturedSuppliersResponse(items=await get_featured_suppliers(store, limit=limit))


@router.get("/{slug}", response_model=SupplierDetailResponse, response_model_by_alias=True)
async def get_supplier(
    slug: str,
    store: CatalogStore = Depends(get_catalog_store),
) -> SupplierDetailResponse:
    """Get a supplier profile by slug."""
    detail = await get_supplier_profile(store, slug)
    if detail is None:
        raise HTTPException(status_code=404, detail=f"Supplier not found: {slug}")
    return detail
