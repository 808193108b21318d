"""API routes."""

from fastapi import APIRouter

from supplier_directory.routes import admin, catalog, category_pages, suppliers

api_router = APIRouter()

# Public directory endpoints
api_router.include_router(suppliers.router, prefix="/v1/suppliers", tags=["suppliers"])
api_router.include_router(category_pages.router, prefix="/v1/category-pages", tags=["category-pages"])
api_router.include_router(catalog.router, prefix="/v1/catalog", tags=["catalog"])

# Admin endpoints (catalog maintenance)
api_router.include_router(admin.router, prefix="/v1/admin", tags=["admin"])
