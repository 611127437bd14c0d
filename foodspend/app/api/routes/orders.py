from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from foodspend.app.analytics.periods import PERIODS
from foodspend.app.api.deps import get_order_service
from foodspend.app.domain.contracts import (
    AnalysisEnvelope,
    ErrorEnvelope,
    OrderEnvelope,
    OrderIn,
    OrderListEnvelope,
    PeriodSummaryEnvelope,
)
from foodspend.app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def _success(data):
    return {"status": "success", "data": data, "error": None}


@router.post("", status_code=201, response_model=OrderEnvelope, responses={400: {"model": ErrorEnvelope}})
def submit_order(
    payload: OrderIn,
    service: OrderService = Depends(get_order_service),
):
    # InvalidOrder is rendered as a 400 envelope by the app-level handler
    order = service.submit(payload.model_dump())
    return _success(order.as_dict())


@router.get("", response_model=OrderListEnvelope, responses={400: {"model": ErrorEnvelope}})
def list_orders(
    category: Optional[str] = Query(None, description="Exact category name; unknown names are ignored"),
    start_date: Optional[str] = Query(None, alias="startDate", description="Inclusive start, ISO-8601"),
    end_date: Optional[str] = Query(None, alias="endDate", description="Inclusive end, ISO-8601"),
    service: OrderService = Depends(get_order_service),
):
    orders = service.list_orders(category=category, start_date=start_date, end_date=end_date)
    return _success([o.as_dict() for o in orders])


@router.get("/analysis", response_model=AnalysisEnvelope)
def order_analysis(service: OrderService = Depends(get_order_service)):
    return _success(service.analysis().as_dict())


@router.get("/summary/{period}", response_model=PeriodSummaryEnvelope)
def period_summary(period: str, service: OrderService = Depends(get_order_service)):
    """
    On-demand version of the scheduled weekly / monthly summary, relative to now.
    """
    if period not in PERIODS:
        raise HTTPException(status_code=404, detail="unknown period")
    return _success(service.summary(period).as_dict())
