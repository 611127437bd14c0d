from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Status = Literal["success", "error"]


class OrderIn(BaseModel):
    # loose on purpose: acceptance rules live in the order validator
    model_config = ConfigDict(extra="ignore")

    category: Optional[Any] = None
    amount: Optional[Any] = None
    quantity: Optional[Any] = None
    date: Optional[Any] = None


class OrderOut(BaseModel):
    id: str
    category: str
    amount: float
    quantity: int
    date: datetime


class HighestSpendingOut(BaseModel):
    category: str
    amount: float


class AnalysisOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category_totals: Dict[str, float] = Field(alias="categoryTotals")
    highest_spending_category: HighestSpendingOut = Field(alias="highestSpendingCategory")
    monthly_totals: Dict[str, float] = Field(alias="monthlyTotals")


class PeriodSummaryOut(BaseModel):
    period: Literal["week", "month"]
    total: float
    count: int
    since: datetime


class OrderEnvelope(BaseModel):
    status: Status = "success"
    data: Optional[OrderOut] = None
    error: Optional[str] = None


class OrderListEnvelope(BaseModel):
    status: Status = "success"
    data: Optional[List[OrderOut]] = None
    error: Optional[str] = None


class AnalysisEnvelope(BaseModel):
    status: Status = "success"
    data: Optional[AnalysisOut] = None
    error: Optional[str] = None


class PeriodSummaryEnvelope(BaseModel):
    status: Status = "success"
    data: Optional[PeriodSummaryOut] = None
    error: Optional[str] = None


class ErrorEnvelope(BaseModel):
    status: Status = "error"
    data: None = None
    error: str
