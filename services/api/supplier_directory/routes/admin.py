"""Admin endpoints for catalog maintenance.

These endpoints are intended for operator use behind the admin console's auth.
"""

import logging
from uuid import uuid4

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from supplier_directory.dependencies import (
    get_admin_mutator,
    get_catalog_store,
    get_recommended_supplier_names,
)
from supplier_directory.schemas import ErrorResponse, error_response
from supplier_directory.services.reconciliation import TargetResolutionError, run_reconciliation
from supplier_directory.settings import get_settings
from supplier_directory.stores.catalog import AdminMutator, CatalogStore
from supplier_directory.stores.redis import acquire_lock, redis_enabled, release_lock

router = APIRouter()
logger = logging.getLogger("uvicorn.error")

RECONCILE_LOCK_KEY = "reconcile:category-pages"


class ReconcileRequest(BaseModel):
    """Request body for category page reconciliation."""

    dry_run: bool = True
    # Target supplier names in display order; defaults to the recommended set.
    names: list[str] | None = None


class PageChangeOut(BaseModel):
    slug: str
    current: list
    target: list[int]
    applied: bool


class ResolvedTargetOut(BaseModel):
    name: str
    supplier_id: int
    supplier_name: str


class ReconcileResponse(BaseModel):
    """Response from category page reconciliation."""

    success: bool
    run_id: str
    dry_run: bool
    targets: list[ResolvedTargetOut]
    target_ids: list[int]
    stats: dict[str, int] = Field(default_factory=dict)
    changes: list[PageChangeOut] = Field(default_factory=list)


@router.post(
    "/category-pages/reconcile",
    response_model=ReconcileResponse,
    responses={409: {"model": ErrorResponse}},
)
async def reconcile_category_pages(
    request: ReconcileRequest,
    store: CatalogStore = Depends(get_catalog_store),
    mutator: AdminMutator = Depends(get_admin_mutator),
    recommended_names: list[str] = Depends(get_recommended_supplier_names),
) -> ReconcileResponse | JSONResponse:
    """Set every category page's supplier_ids to the canonical target.

    Runs in dry-run mode by default to avoid accidental writes in production.
    """
    run_id = str(uuid4())
    source_names = request.names if request.names is not None else recommended_names
    names = [n.strip() for n in source_names if n and n.strip()]

    logger.info(f"[reconcile] start run_id={run_id} dry_run={request.dry_run} names={names}")

    locked = False
    if not request.dry_run and redis_enabled():
        locked = await acquire_lock(RECONCILE_LOCK_KEY, ttl=get_settings().reconcile_lock_ttl)
        if not locked:
            return error_response(
                409,
                "RECONCILE_IN_PROGRESS",
                "Another reconciliation run is in progress",
            )

    try:
        resolved, result = await run_reconciliation(
            store=store,
            mutator=mutator,
            names=names,
            dry_run=request.dry_run,
        )
    except TargetResolutionError as e:
        logger.warning(f"[reconcile] aborted run_id={run_id}: {e}")
        return error_response(
            409,
            "TARGET_UNRESOLVED",
            str(e),
            {"unresolved": e.unresolved},
        )
    finally:
        if locked:
            await release_lock(RECONCILE_LOCK_KEY)

    return ReconcileResponse(
        success=result.stats.failed == 0,
        run_id=run_id,
        dry_run=result.dry_run,
        targets=[
            ResolvedTargetOut(name=r.name, supplier_id=r.supplier_id, supplier_name=r.supplier_name)
            for r in resolved
        ],
        target_ids=result.target_ids,
        stats={
            "total": result.stats.total,
            "updated": result.stats.updated,
            "skipped": result.stats.skipped,
            "failed": result.stats.failed,
        },
        changes=[
            PageChangeOut(slug=c.slug, current=c.current, target=c.target, applied=c.applied)
            for c in result.changes
        ],
    )
