"""Shared fixtures: an in-memory catalog and an HTTP client wired to it."""

import pytest
from httpx import ASGITransport, AsyncClient

from factories import FakeAdminMutator, FakeCatalogStore, build_catalog
from supplier_directory.dependencies import (
    get_admin_mutator,
    get_catalog_store,
    get_recommended_supplier_names,
)
from supplier_directory.main import app
from supplier_directory.settings import DEFAULT_RECOMMENDED_SUPPLIERS


@pytest.fixture
def store() -> FakeCatalogStore:
    return build_catalog()


@pytest.fixture
def mutator(store: FakeCatalogStore) -> FakeAdminMutator:
    return FakeAdminMutator(store)


@pytest.fixture
async def client(store: FakeCatalogStore, mutator: FakeAdminMutator):
    """Create test client backed by the in-memory catalog."""

    async def _store():
        yield store

    async def _mutator():
        yield mutator

    app.dependency_overrides[get_catalog_store] = _store
    app.dependency_overrides[get_admin_mutator] = _mutator
    app.dependency_overrides[get_recommended_supplier_names] = lambda: list(DEFAULT_RECOMMENDED_SUPPLIERS)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
