# This module rolls a list of investments up into a table and a few headline counts.
# The table keeps the incoming order, which is newest first when it comes from the data API.

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from roi_validator.investments.models import Investment

VALIDATED_LABEL = "VALIDATED"
BURNING_CASH_LABEL = "BURNING CASH"

INVESTMENT_COLUMNS = [
    "id",
    "project_name",
    "cost",
    "revenue",
    "roi_percent",
    "is_validated",
    "verdict",
    "created_at",
]


@dataclass(frozen=True)
class PortfolioSummary:
    project_count: int
    validated_count: int
    burning_count: int
    total_cost: float
    total_revenue: float


def verdict_label(is_validated: bool) -> str:
    return VALIDATED_LABEL if is_validated else BURNING_CASH_LABEL


def build_investment_frame(investments: Sequence[Investment]) -> pd.DataFrame:
    rows = []
    for investment in investments:
        roi = investment.roi
        rows.append(
            {
                "id": investment.id,
                "project_name": investment.project_name,
                "cost": investment.cost,
                "revenue": investment.revenue,
                "roi_percent": roi.roi_percent,
                "is_validated": roi.is_validated,
                "verdict": verdict_label(roi.is_validated),
                "created_at": investment.created_at,
            }
        )
    return pd.DataFrame(rows, columns=INVESTMENT_COLUMNS)


def summarize_portfolio(investments: Sequence[Investment]) -> PortfolioSummary:
    frame = build_investment_frame(investments)
    if frame.empty:
        return PortfolioSummary(
            project_count=0,
            validated_count=0,
            burning_count=0,
            total_cost=0.0,
            total_revenue=0.0,
        )

    validated_count = int(frame["is_validated"].sum())
    return PortfolioSummary(
        project_count=len(frame),
        validated_count=validated_count,
        burning_count=len(frame) - validated_count,
        total_cost=float(frame["cost"].sum()),
        total_revenue=float(frame["revenue"].sum()),
    )
