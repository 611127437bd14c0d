from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from foodspend.app.analytics.periods import PERIODS
from foodspend.app.api.deps import get_order_service, get_summary_scheduler
from foodspend.app.services.order_service import OrderService
from foodspend.app.services.summary_scheduler import SummaryScheduler

router = APIRouter(prefix="/api/system", tags=["system"])


class SystemStatusOut(BaseModel):
    store: str
    order_count: int
    scheduler_running: bool


@router.get("/status", response_model=SystemStatusOut)
def get_status(
    service: OrderService = Depends(get_order_service),
    scheduler: Optional[SummaryScheduler] = Depends(get_summary_scheduler),
):
    return {
        "store": service.store.kind,
        "order_count": len(service.store.all_orders()),
        "scheduler_running": bool(scheduler and scheduler.running),
    }


def _require_scheduler(scheduler: Optional[SummaryScheduler]) -> SummaryScheduler:
    if scheduler is None:
        raise HTTPException(status_code=404, detail="summary scheduler disabled")
    return scheduler


@router.post("/summary/{period}")
def post_summary(
    period: str,
    scheduler: Optional[SummaryScheduler] = Depends(get_summary_scheduler),
):
    """Run a scheduled summary job now (same logging as the timed trigger)."""
    if period not in PERIODS:
        raise HTTPException(status_code=404, detail="unknown period")
    summary = _require_scheduler(scheduler).run_once(period)
    return summary.as_dict()


@router.get("/last-summary")
def get_last_summary(
    period: str = Query(..., description="week | month"),
    scheduler: Optional[SummaryScheduler] = Depends(get_summary_scheduler),
):
    if period not in PERIODS:
        raise HTTPException(status_code=404, detail="unknown period")
    summary = _require_scheduler(scheduler).latest.get(period)
    if not summary:
        return None
    return summary.as_dict()
