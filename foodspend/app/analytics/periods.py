from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, Literal

from foodspend.app.domain.orders import Order, as_utc

Period = Literal["week", "month"]
PERIODS = ("week", "month")


@dataclass(frozen=True)
class PeriodSummary:
    period: Period
    total: float
    count: int
    since: datetime

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def period_start(period: str, reference: datetime) -> datetime:
    """
    Start of the current period relative to `reference`, at 00:00:
      - week:  the most recent Sunday (the reference day itself on a Sunday)
      - month: the first day of the reference month
    """
    ref = as_utc(reference)
    midnight = ref.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == "week":
        # weekday(): Monday == 0 ... Sunday == 6
        days_since_sunday = (midnight.weekday() + 1) % 7
        return midnight - timedelta(days=days_since_sunday)
    if period == "month":
        return midnight.replace(day=1)
    raise ValueError(f"unknown period: {period!r}")


def summarize_period(orders: Iterable[Order], period: str, reference: datetime) -> PeriodSummary:
    since = period_start(period, reference)
    total = 0.0
    count = 0
    for order in orders:
        if order.date >= since:
            total += order.line_total
            count += 1
    return PeriodSummary(period=period, total=total, count=count, since=since)
