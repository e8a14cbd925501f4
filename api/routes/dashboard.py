"""Dashboard summary endpoint for the stat cards."""

from fastapi import APIRouter, Depends

from api.dependencies import get_store
from api.models import AggregatesOut, DashboardSummary
from catalog.store import CatalogStore
from catalog.view_filter import aggregate

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardSummary, summary="Dashboard summary statistics")
def dashboard_summary(store: CatalogStore = Depends(get_store)) -> DashboardSummary:
    """Return load status and the full-catalogue statistics.

    Unlike /bodies this never fails while the catalogue is unavailable; the
    stats are all zero and ``status`` / ``error`` explain why.
    """
    snap = store.snapshot()
    return DashboardSummary(
        status=snap.status.value,
        stats=AggregatesOut.from_domain(aggregate(snap.dataset)),
        loaded_at=snap.loaded_at,
        source_url=snap.source_url,
        error=snap.error,
    )
