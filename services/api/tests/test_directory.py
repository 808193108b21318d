import pytest

from factories import make_supplier
from supplier_directory.services.directory import (
    get_featured_suppliers,
    list_directory,
    matches_filters,
    paginate_suppliers,
    to_supplier_summary,
)
from supplier_directory.services.reviews import summarize_reviews
from supplier_directory.stores.catalog import SupplierFilters

NO_FILTERS = SupplierFilters()


def ids(page):
    return [s.id for s in page.items]


@pytest.mark.asyncio
async def test_orders_by_home_rank_desc_then_id(store):
    page = await list_directory(store, NO_FILTERS, cursor=None, limit=50)

    assert ids(page) == [1, 2, 3, 4, 5, 6]
    assert page.next_cursor is None
    assert page.total == 6


@pytest.mark.asyncio
async def test_cursor_walks_all_pages_without_gaps(store):
    seen = []
    cursor = None
    pages = 0
    while True:
        page = await list_directory(store, NO_FILTERS, cursor=cursor, limit=2)
        seen.extend(ids(page))
        pages += 1
        if page.next_cursor is None:
            break
        assert page.next_cursor == page.items[-1].id
        cursor = page.next_cursor

    assert seen == [1, 2, 3, 4, 5, 6]
    assert pages == 3


@pytest.mark.asyncio
async def test_same_arguments_return_same_page(store):
    first = await list_directory(store, NO_FILTERS, cursor=2, limit=2)
    second = await list_directory(store, NO_FILTERS, cursor=2, limit=2)

    assert ids(first) == ids(second) == [3, 4]
    assert first.next_cursor == second.next_cursor == 4


@pytest.mark.asyncio
async def test_insert_before_cursor_does_not_shift_next_page(store):
    first = await list_directory(store, NO_FILTERS, cursor=None, limit=2)
    store.suppliers.append(make_supplier(7, "Newcomer", home_rank=100))

    second = await list_directory(store, NO_FILTERS, cursor=first.next_cursor, limit=2)

    assert ids(second) == [3, 4]


@pytest.mark.parametrize(
    ("filters", "expected"),
    [
        (SupplierFilters(category="electronics"), [1, 4]),
        (SupplierFilters(region="west-coast"), [2, 4, 5]),
        (SupplierFilters(lot_size="pallet"), [1, 2, 4, 5]),
        (SupplierFilters(verified=True), [1, 2, 4]),
        (SupplierFilters(verified=False), [3, 5, 6]),
        (SupplierFilters(home_only=True), [1, 2, 3, 4, 5]),
        (SupplierFilters(search="LIQUIDATION"), [2, 3, 4]),
        (SupplierFilters(search="amazon"), [1]),
        (SupplierFilters(search="manifested"), [4]),
        (SupplierFilters(category="general-merchandise", region="west-coast"), [2, 5]),
    ],
)
@pytest.mark.asyncio
async def test_filters(store, filters, expected):
    page = await list_directory(store, filters, cursor=None, limit=50)

    assert ids(page) == expected
    assert page.total == len(expected)


@pytest.mark.asyncio
async def test_unknown_filter_value_matches_nothing(store):
    page = await list_directory(store, SupplierFilters(category="boats"), cursor=None, limit=10)

    assert page.items == []
    assert page.next_cursor is None
    assert page.total == 0


@pytest.mark.asyncio
async def test_unknown_cursor_returns_empty_page(store):
    page = await list_directory(store, NO_FILTERS, cursor=999, limit=10)

    assert page.items == []
    assert page.next_cursor is None
    assert page.total == 6


def test_blank_params_are_ignored():
    filters = SupplierFilters.from_params(search="  ", category="", region=None, lot_size=" pallet ")

    assert filters == SupplierFilters(lot_size="pallet")


def test_limit_below_one_is_treated_as_one(store):
    page = paginate_suppliers(store.suppliers, NO_FILTERS, after=None, limit=0)

    assert ids(page) == [1]
    assert page.next_cursor == 1


def test_supplier_summary_rounds_rating_to_one_decimal(store):
    supplier = store.suppliers[0]
    summary = summarize_reviews([r for r in store.reviews if r.supplier_id == 1 and r.is_approved][:2])

    card = to_supplier_summary(supplier, summary)

    assert card.rating_average == 4.5
    assert card.rating_count == 2
    assert card.region.slug == "midwest"
    assert [c.slug for c in card.categories] == ["electronics", "general-merchandise"]


def test_supplier_summary_without_reviews():
    card = to_supplier_summary(make_supplier(9, "Quiet Supplier"))

    assert card.rating_average is None
    assert card.rating_count == 0
    assert card.region is None


@pytest.mark.parametrize(
    "filters",
    [
        SupplierFilters(category="apparel"),
        SupplierFilters(region="midwest", lot_size="truckload"),
        SupplierFilters(verified=False),
        SupplierFilters(home_only=True),
        SupplierFilters(category="boats"),
    ],
)
@pytest.mark.asyncio
async def test_store_narrowing_agrees_with_engine_filters(store, filters):
    narrowed = await store.get_suppliers(filters)

    assert [s.id for s in narrowed] == [s.id for s in store.suppliers if matches_filters(s, filters)]


def test_home_only_from_params():
    assert SupplierFilters.from_params(home_only=True).home_only is True
    assert SupplierFilters.from_params().home_only is None


@pytest.mark.asyncio
async def test_featured_suppliers_take_top_ranked_only(store):
    featured = await get_featured_suppliers(store, limit=4)
    everyone = await get_featured_suppliers(store, limit=10)

    assert [card.id for card in featured] == [1, 2, 3, 4]
    assert [card.id for card in everyone] == [1, 2, 3, 4, 5]
    assert featured[0].rating_count == 3
