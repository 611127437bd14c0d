from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional

from foodspend.app.analytics.periods import PeriodSummary, summarize_period
from foodspend.app.analytics.spending import SpendingAnalysis, analyze_orders
from foodspend.app.domain.errors import InvalidDateRange, InvalidOrder
from foodspend.app.domain.orders import Order
from foodspend.app.services.order_filters import filter_orders
from foodspend.app.services.order_store import OrderStore
from foodspend.app.services.order_validation import IdFactory, uuid_str, validate_order

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderService:
    """
    Boundary operations over an injected store:
      - submit:       validate, then append
      - list_orders:  snapshot + optional filters
      - analysis:     category / month totals and the top category
      - summary:      week or month to date, relative to the clock
    """

    def __init__(
        self,
        store: OrderStore,
        *,
        clock: Clock = utcnow,
        id_factory: IdFactory = uuid_str,
    ) -> None:
        self.store = store
        self.clock = clock
        self.id_factory = id_factory

    def submit(self, candidate: Mapping[str, Any]) -> Order:
        try:
            order = validate_order(candidate, id_factory=self.id_factory)
        except InvalidOrder as exc:
            logger.info("Rejected order: field=%s reason=%s", exc.field, exc.reason)
            raise
        self.store.append(order)
        logger.info(
            "Recorded order id=%s category=%s line_total=%.2f",
            order.id,
            order.category.value,
            order.line_total,
        )
        return order

    def list_orders(
        self,
        *,
        category: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[Order]:
        try:
            return filter_orders(
                self.store.all_orders(),
                category=category,
                start_date=start_date,
                end_date=end_date,
            )
        except InvalidDateRange as exc:
            logger.info("Rejected order listing: %s", exc.reason)
            raise

    def analysis(self) -> SpendingAnalysis:
        return analyze_orders(self.store.all_orders())

    def summary(self, period: str, at: Optional[datetime] = None) -> PeriodSummary:
        reference = at or self.clock()
        return summarize_period(self.store.all_orders(), period, reference)
