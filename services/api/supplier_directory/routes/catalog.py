"""Taxonomy endpoints used to build directory filters.

GET /v1/catalog/categories
GET /v1/catalog/regions
GET /v1/catalog/lot-sizes

Lists are cached in Redis for TAXONOMY_CACHE_TTL seconds when Redis is up.
"""

import logging
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Depends

from supplier_directory.dependencies import get_catalog_store
from supplier_directory.schemas import TaxonomyItem, TaxonomyListResponse
from supplier_directory.settings import get_settings
from supplier_directory.stores.catalog import CatalogStore, TaxonomyCount
from supplier_directory.stores.redis import get_payload_cache, redis_enabled, set_payload_cache

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


async def _cached_taxonomy(
    name: str,
    load: Callable[[], Awaitable[list[TaxonomyCount]]],
) -> TaxonomyListResponse:
    ttl = get_settings().taxonomy_cache_ttl
    use_cache = ttl > 0 and redis_enabled()
    cache_key = f"catalog:{name}"

    if use_cache:
        try:
            cached = await get_payload_cache(cache_key)
        except Exception:
            logger.exception("[catalog] cache read failed key=%s", cache_key)
            cached = None
        if cached is not None:
            return TaxonomyListResponse.model_validate(cached)

    rows = await load()
    response = TaxonomyListResponse(
        items=[
            TaxonomyItem(id=r.id, slug=r.slug, name=r.name, supplier_count=r.supplier_count)
            for r in rows
        ]
    )

    if use_cache:
        try:
            await set_payload_cache(cache_key, response.model_dump(by_alias=True), ttl)
        except Exception:
            logger.exception("[catalog] cache write failed key=%s", cache_key)
    return response


@router.get("/categories", response_model=TaxonomyListResponse, response_model_by_alias=True)
async def list_categories(store: CatalogStore = Depends(get_catalog_store)) -> TaxonomyListResponse:
    """List categories with supplier counts, sorted by name."""
    return await _cached_taxonomy("categories", store.list_categories)


@router.get("/regions", response_model=TaxonomyListResponse, response_model_by_alias=True)
async def list_regions(store: CatalogStore = Depends(get_catalog_store)) -> TaxonomyListResponse:
    """List regions with supplier counts, sorted by name."""
    return await _cached_taxonomy("regions", store.list_regions)


@router.get("/lot-sizes", response_model=TaxonomyListResponse, response_model_by_alias=True)
async def list_lot_sizes(store: CatalogStore = Depends(get_catalog_store)) -> TaxonomyListResponse:
    """List lot sizes with supplier counts, sorted by name."""
    return await _cached_taxonomy("lot-sizes", store.list_lot_sizes)
