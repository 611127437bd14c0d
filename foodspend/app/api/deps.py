# foodspend/app/api/deps.py
from __future__ import annotations

from fastapi import HTTPException, Request

from foodspend.app.services.order_service import OrderService
from foodspend.app.services.summary_scheduler import SummaryScheduler


def get_order_service(request: Request) -> OrderService:
    """
    The service (and the store behind it) is owned by the application and
    attached to app.state in create_app(); nothing lives at module level.
    """
    service = getattr(request.app.state, "order_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="order service not configured")
    return service


def get_summary_scheduler(request: Request) -> SummaryScheduler | None:
    return getattr(request.app.state, "summary_scheduler", None)
