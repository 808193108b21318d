"""Category page endpoints.

GET /v1/category-pages/{slug}/suppliers - Ordered featured suppliers for a page.
"""

from fastapi import APIRouter, Depends, HTTPException

from supplier_directory.dependencies import get_catalog_store, get_recommended_supplier_names
from supplier_directory.schemas import CategoryPageSuppliersResponse
from supplier_directory.services.directory import summarize_cards
from supplier_directory.services.recommended import resolve_category_page_suppliers
from supplier_directory.stores.catalog import CatalogStore

router = APIRouter()


@router.get(
    "/{slug}/suppliers",
    response_model=CategoryPageSuppliersResponse,
    response_model_by_alias=True,
)
async def get_category_page_suppliers(
    slug: str,
    store: CatalogStore = Depends(get_catalog_store),
    recommended_names: list[str] = Depends(get_recommended_supplier_names),
) -> CategoryPageSuppliersResponse:
    """Resolve the featured suppliers for a category page.

    Curated pages keep their configured order; pages without a selection fall
    back to the house recommended suppliers in their configured order.
    """
    page = await store.get_category_page(slug)
    if page is None:
        raise HTTPException(status_code=404, detail=f"Category page not found: {slug}")

    selection = await resolve_category_page_suppliers(store, page, recommended_names)
    return CategoryPageSuppliersResponse(
        slug=page.slug,
        topic_category=page.topic_category,
        source=selection.source,
        suppliers=await summarize_cards(store, selection.suppliers),
    )
