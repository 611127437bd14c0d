from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from foodspend.app.domain.categories import FoodCategory


@dataclass(frozen=True)
class Order:
    id: str
    category: FoodCategory
    amount: float
    quantity: int
    date: datetime  # aware, UTC

    @property
    def line_total(self) -> float:
        return self.amount * self.quantity

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category.value,
            "amount": self.amount,
            "quantity": self.quantity,
            "date": self.date,
        }


def as_utc(value: datetime) -> datetime:
    # naive values are read as UTC (sqlite drops tzinfo on the way back)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or date-time (or a date/datetime object) into an
    aware UTC datetime. Date-only values land on midnight UTC.
    Returns None when the value is missing, not a valid calendar date, or
    falls outside the datetime range once shifted to UTC.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None

    try:
        return as_utc(parsed)
    except OverflowError:
        # e.g. 9999-12-31T23:00-05:00 lands past datetime.max in UTC
        return None
