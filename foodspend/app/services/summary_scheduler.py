from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Awaitable, Callable, Dict, List, Optional

from foodspend.app.analytics.periods import PERIODS, PeriodSummary, period_start
from foodspend.app.domain.orders import as_utc
from foodspend.app.services.order_service import Clock, OrderService, utcnow

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

SUMMARY_LABELS = {"week": "Weekly Summary", "month": "Monthly Summary"}


def next_trigger(period: str, now: datetime) -> datetime:
    """
    Next wall-clock trigger strictly after `now` (UTC):
      - week:  next Sunday 00:00
      - month: next 1st of the month 00:00
    """
    start = period_start(period, now)
    if period == "week":
        return start + timedelta(days=7)
    if start.month == 12:
        return start.replace(year=start.year + 1, month=1)
    return start.replace(month=start.month + 1)


class SummaryScheduler:
    def __init__(
        self,
        service: OrderService,
        *,
        clock: Optional[Clock] = None,
        sleep: Sleep = asyncio.sleep,
        periods: tuple[str, ...] = PERIODS,
    ) -> None:
        self.service = service
        self.clock = clock or service.clock or utcnow
        self.sleep = sleep
        self.periods = periods
        self.latest: Dict[str, PeriodSummary] = {}
        self._tasks: List[asyncio.Task] = []
        self._last_trigger: Dict[str, datetime] = {}

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    def run_once(self, period: str, at: Optional[datetime] = None) -> PeriodSummary:
        summary = self.service.summary(period, at=at)
        self.latest[period] = summary
        logger.info("%s: %s", SUMMARY_LABELS.get(period, period), summary.as_dict())
        return summary

    async def run_forever(self, period: str) -> None:
        while True:
            now = as_utc(self.clock())
            trigger = next_trigger(period, now)
            await self.sleep(max((trigger - now).total_seconds(), 0.0))
            # an early wake-up recomputes the same trigger; run it only once
            if self._last_trigger.get(period) == trigger:
                continue
            self._last_trigger[period] = trigger
            try:
                self.run_once(period, at=trigger)
            except Exception:
                logger.exception("Summary job failed for period=%s", period)

    def start(self) -> None:
        if self.running:
            return
        loop = asyncio.get_running_loop()
        self._tasks = [
            loop.create_task(self.run_forever(period), name=f"summary-{period}")
            for period in self.periods
        ]
        logger.info("Summary scheduler started for periods=%s", ",".join(self.periods))

    async def stop(self) -> None:
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        if tasks:
            logger.info("Summary scheduler stopped")
