import pytest

from factories import FakeAdminMutator
from scripts.set_consistent_suppliers import execute, parse_args
from supplier_directory.settings import DEFAULT_RECOMMENDED_SUPPLIERS


def test_parse_args_defaults():
    args = parse_args([])

    assert args.dry_run is False
    assert args.names is None


def test_parse_args_names_and_dry_run():
    args = parse_args(["--dry-run", "--names", "B-Stock,Bulq"])

    assert args.dry_run is True
    assert args.names == "B-Stock,Bulq"


@pytest.mark.asyncio
async def test_execute_dry_run_prints_diff(store, mutator):
    lines: list[str] = []

    code = await execute(
        store=store,
        mutator=mutator,
        names=DEFAULT_RECOMMENDED_SUPPLIERS,
        dry_run=True,
        out=lines.append,
    )

    assert code == 0
    assert mutator.calls == []
    assert '  found "B-Stock" -> id 1 (B-Stock Solutions)' in lines
    assert "target supplier ids: [1, 2, 3, 4]" in lines
    assert "  apparel: would update [5, 3] -> [1, 2, 3, 4]" in lines
    assert "updated: 3" in lines
    assert lines[-1].startswith("DRY RUN")


@pytest.mark.asyncio
async def test_execute_twice_is_idempotent(store, mutator):
    first: list[str] = []
    second: list[str] = []

    assert await execute(store=store, mutator=mutator, names=["Bulq"], dry_run=False, out=first.append) == 0
    assert await execute(store=store, mutator=mutator, names=["Bulq"], dry_run=False, out=second.append) == 0

    assert "  electronics: updated [] -> [6]" in first
    assert "updated: 0" in second
    assert "skipped (already correct): 3" in second


@pytest.mark.asyncio
async def test_execute_aborts_on_unresolved_name(store, mutator):
    lines: list[str] = []

    code = await execute(
        store=store,
        mutator=mutator,
        names=["B-Stock", "Nowhere Goods"],
        dry_run=False,
        out=lines.append,
    )

    assert code == 1
    assert mutator.calls == []
    assert lines == [
        "ERROR: Could not resolve target suppliers: Nowhere Goods. Aborting, no pages were changed."
    ]


@pytest.mark.asyncio
async def test_execute_failed_page_exit_code(store):
    mutator = FakeAdminMutator(store, fail_slugs={"apparel"})
    lines: list[str] = []

    code = await execute(store=store, mutator=mutator, names=["Bulq"], dry_run=False, out=lines.append)

    assert code == 2
    assert "  apparel: FAILED to update" in lines
    assert "failed: 1" in lines


@pytest.mark.asyncio
async def test_main_warns_when_redis_is_unavailable(monkeypatch: pytest.MonkeyPatch, capsys):
    from contextlib import asynccontextmanager

    from scripts import set_consistent_suppliers as script

    calls: list[dict] = []

    async def noop() -> None:
        return None

    async def failing_init_redis() -> None:
        raise ConnectionError("connection refused")

    @asynccontextmanager
    async def fake_session():
        yield None

    async def fake_execute(**kwargs) -> int:
        calls.append(kwargs)
        return 0

    monkeypatch.setattr(script, "init_db", noop)
    monkeypatch.setattr(script, "ping_db", noop)
    monkeypatch.setattr(script, "close_db", noop)
    monkeypatch.setattr(script, "close_redis", noop)
    monkeypatch.setattr(script, "init_redis", failing_init_redis)
    monkeypatch.setattr(script, "get_session", fake_session)
    monkeypatch.setattr(script, "execute", fake_execute)

    code = await script.main(["--names", "Bulq"])

    assert code == 0
    assert "WARNING: Redis unavailable (connection refused); running without the run lock" in capsys.readouterr().out
    assert calls[0]["names"] == ["Bulq"]
    assert calls[0]["dry_run"] is False
