from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from foodspend.app.domain.orders import Order


@dataclass(frozen=True)
class SpendingAnalysis:
    category_totals: Dict[str, float]
    highest_spending_category: Tuple[str, float]
    monthly_totals: Dict[str, float]

    def as_dict(self) -> Dict[str, Any]:
        category, amount = self.highest_spending_category
        return {
            "categoryTotals": dict(self.category_totals),
            "highestSpendingCategory": {"category": category, "amount": amount},
            "monthlyTotals": dict(self.monthly_totals),
        }


def month_key(order: Order) -> str:
    # "3-2024": unpadded 1-indexed month, full year
    return f"{order.date.month}-{order.date.year}"


def category_totals(orders: Iterable[Order]) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for order in orders:
        key = order.category.value
        totals[key] = totals.get(key, 0.0) + order.line_total
    return totals


def highest_spending_category(totals: Dict[str, float]) -> Tuple[str, float]:
    """
    Argmax over category totals. Strict comparison keeps the first category
    (in dict order) among equal maxima; no data gives ("", 0.0).
    """
    best: Tuple[str, float] = ("", 0.0)
    for category, total in totals.items():
        if total > best[1]:
            best = (category, total)
    return best


def monthly_totals(orders: Iterable[Order]) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for order in orders:
        key = month_key(order)
        totals[key] = totals.get(key, 0.0) + order.line_total
    return totals


def analyze_orders(orders: Iterable[Order]) -> SpendingAnalysis:
    rows: List[Order] = list(orders)
    by_category = category_totals(rows)
    return SpendingAnalysis(
        category_totals=by_category,
        highest_spending_category=highest_spending_category(by_category),
        monthly_totals=monthly_totals(rows),
    )
