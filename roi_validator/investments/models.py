# This file defines the investment record returned by the hosted data API
# and the editable subset of fields sent back on create and update.

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from roi_validator.investments.roi_classifier import RoiResult, classify_roi


class InvestmentFields(BaseModel):
    """User-editable investment fields."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    cost: float
    revenue: float

    def to_payload(self) -> dict[str, Any]:
        return {
            "project_name": self.project_name,
            "cost": self.cost,
            "revenue": self.revenue,
        }


class Investment(BaseModel):
    """Read-only copy of a stored investment row."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    project_name: str
    cost: float
    revenue: float
    created_at: datetime | None = None
    user_id: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> str:
        # Tables keyed by bigint return numeric ids.
        return str(value)

    @property
    def roi(self) -> RoiResult:
        return classify_roi(self.cost, self.revenue)

    def editable_fields(self) -> InvestmentFields:
        return InvestmentFields(project_name=self.project_name, cost=self.cost, revenue=self.revenue)
