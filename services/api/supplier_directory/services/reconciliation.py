"""Category page consistency reconciliation.

Rewrites every category page's supplier_ids to one canonical ordered target
list, used to repair drift between pages.

Notes:
- The target is given as brand names and resolved with the fuzzy matcher.
  If any name fails to resolve, nothing is written (TargetResolutionError).
- Idempotent: pages whose supplier_ids already equal the target (same ids,
  same order) are skipped, so a second run updates nothing.
- Pages are updated one at a time and independently; aborting mid-run leaves
  some pages updated and the rest untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from supplier_directory.models import CategoryPage, Supplier
from supplier_directory.services.matching import match_supplier_name
from supplier_directory.stores.catalog import AdminMutator, CatalogStore

logger = logging.getLogger("uvicorn.error")


class TargetResolutionError(Exception):
    """Raised when the target supplier names cannot all be resolved."""

    def __init__(self, unresolved: Sequence[str], message: str | None = None) -> None:
        self.unresolved = list(unresolved)
        super().__init__(
            message or f"Could not resolve target suppliers: {', '.join(self.unresolved)}"
        )


@dataclass
class ResolvedTarget:
    name: str
    supplier_id: int
    supplier_name: str


@dataclass
class PageChange:
    """A page whose supplier_ids differ from the target."""

    slug: str
    current: list
    target: list[int]
    applied: bool = False


@dataclass
class ReconcileStats:
    total: int = 0
    updated: int = 0
    skipped: int = 0
    failed: int = 0


@dataclass
class ReconcileResult:
    dry_run: bool
    target_ids: list[int]
    stats: ReconcileStats = field(default_factory=ReconcileStats)
    changes: list[PageChange] = field(default_factory=list)


def resolve_target(names: Sequence[str], catalog: Sequence[Supplier]) -> list[ResolvedTarget]:
    """Resolve every target name against the catalog.

    Raises:
        TargetResolutionError: if `names` is empty or any name has no match.
    """
    if not names:
        raise TargetResolutionError([], "No target supplier names given")

    resolved: list[ResolvedTarget] = []
    unresolved: list[str] = []
    for name in names:
        supplier = match_supplier_name(name, catalog)
        if supplier is None:
            unresolved.append(name)
            continue
        resolved.append(ResolvedTarget(name=name, supplier_id=supplier.id, supplier_name=supplier.name))

    if unresolved:
        raise TargetResolutionError(unresolved)
    return resolved


async def reconcile_category_pages(
    *,
    target_ids: Sequence[int],
    pages: Sequence[CategoryPage],
    mutator: AdminMutator,
    dry_run: bool,
) -> ReconcileResult:
    """Bring every page's supplier_ids in line with target_ids.

    Args:
        target_ids: Canonical ordered supplier ids.
        pages: Category pages to check.
        mutator: Write access used when not in dry-run mode.
        dry_run: Report would-be changes without writing.

    Returns:
        ReconcileResult with counts and per-page changes. In dry-run mode
        `updated` counts the pages that would be updated.
    """
    target = list(target_ids)
    result = ReconcileResult(dry_run=dry_run, target_ids=target)
    result.stats.total = len(pages)

    for page in pages:
        current = list(page.supplier_ids or [])
        if current == target:
            result.stats.skipped += 1
            continue

        change = PageChange(slug=page.slug, current=current, target=target)
        result.changes.append(change)

        if dry_run:
            result.stats.updated += 1
            continue

        if await mutator.update_category_page_supplier_ids(page.slug, target):
            change.applied = True
            result.stats.updated += 1
        else:
            result.stats.failed += 1
            logger.warning("[reconcile] update failed slug=%s", page.slug)

    return result


async def run_reconciliation(
    *,
    store: CatalogStore,
    mutator: AdminMutator,
    names: Sequence[str],
    dry_run: bool,
) -> tuple[list[ResolvedTarget], ReconcileResult]:
    """Resolve target names, then reconcile all category pages.

    Resolution happens before any page is read for writing, so a failed
    resolution never leaves a partial target behind.
    """
    catalog = await store.get_suppliers()
    resolved = resolve_target(names, catalog)
    target_ids = [r.supplier_id for r in resolved]

    pages = await store.get_category_pages()
    result = await reconcile_category_pages(
        target_ids=target_ids,
        pages=pages,
        mutator=mutator,
        dry_run=dry_run,
    )

    logger.info(
        "[reconcile] done dry_run=%s target=%s total=%s updated=%s skipped=%s failed=%s",
        dry_run,
        target_ids,
        result.stats.total,
        result.stats.updated,
        result.stats.skipped,
        result.stats.failed,
    )
    return resolved, result
