"""FastAPI dependencies for the catalog store and engine configuration.

Routes never reach for module-level state directly; tests swap these out via
`app.dependency_overrides`.
"""

from collections.abc import AsyncGenerator

from supplier_directory.settings import get_settings
from supplier_directory.stores.catalog import AdminMutator, CatalogStore, SqlAdminMutator, SqlCatalogStore
from supplier_directory.stores.postgres import get_session


async def get_catalog_store() -> AsyncGenerator[CatalogStore, None]:
    """Catalog store bound to a request-scoped session."""
    async with get_session() as session:
        yield SqlCatalogStore(session)


async def get_admin_mutator() -> AsyncGenerator[AdminMutator, None]:
    """Admin mutator bound to its own session."""
    async with get_session() as session:
        yield SqlAdminMutator(session)


def get_recommended_supplier_names() -> list[str]:
    """House recommended supplier names, in display order."""
    return list(get_settings().recommended_supplier_names)
