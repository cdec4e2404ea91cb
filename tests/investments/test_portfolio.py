# This test file covers the investment model and the portfolio roll-up.

from __future__ import annotations

from datetime import UTC, datetime

from roi_validator.investments.models import Investment
from roi_validator.investments.portfolio import (
    BURNING_CASH_LABEL,
    INVESTMENT_COLUMNS,
    VALIDATED_LABEL,
    build_investment_frame,
    summarize_portfolio,
)


def _investments() -> list[Investment]:
    return [
        Investment(
            id="b",
            project_name="Newest",
            cost=10000,
            revenue=15000,
            created_at=datetime(2026, 3, 2, tzinfo=UTC),
            user_id="user-1",
        ),
        Investment(
            id="a",
            project_name="Older",
            cost=2000,
            revenue=2000,
            created_at=datetime(2026, 3, 1, tzinfo=UTC),
            user_id="user-1",
        ),
    ]


def test_investment_model_ignores_unknown_columns() -> None:
    investment = Investment.model_validate(
        {
            "id": "42",
            "project_name": "Food Truck",
            "cost": "1500.5",
            "revenue": 3000,
            "created_at": "2026-03-01T10:00:00+00:00",
            "user_id": "user-1",
            "extra_column": "ignored",
        }
    )

    assert investment.cost == 1500.5
    assert investment.created_at == datetime(2026, 3, 1, 10, 0, tzinfo=UTC)
    assert investment.roi.is_validated is True
    assert investment.editable_fields().to_payload() == {
        "project_name": "Food Truck",
        "cost": 1500.5,
        "revenue": 3000.0,
    }


def test_build_investment_frame_keeps_order_and_verdicts() -> None:
    frame = build_investment_frame(_investments())

    assert list(frame.columns) == INVESTMENT_COLUMNS
    assert frame["id"].tolist() == ["b", "a"]
    assert frame["roi_percent"].tolist() == [50.0, 0.0]
    assert frame["verdict"].tolist() == [VALIDATED_LABEL, BURNING_CASH_LABEL]


def test_build_investment_frame_empty_has_columns() -> None:
    frame = build_investment_frame([])
    assert frame.empty
    assert list(frame.columns) == INVESTMENT_COLUMNS


def test_summarize_portfolio_counts_and_totals() -> None:
    summary = summarize_portfolio(_investments())

    assert summary.project_count == 2
    assert summary.validated_count == 1
    assert summary.burning_count == 1
    assert summary.total_cost == 12000.0
    assert summary.total_revenue == 17000.0


def test_summarize_empty_portfolio() -> None:
    summary = summarize_portfolio([])
    assert summary.project_count == 0
    assert summary.total_cost == 0.0
