# This file renders the headline portfolio metrics above the investment list.

from __future__ import annotations

import streamlit as st

from roi_validator.app_ui.formatting import format_count, format_currency
from roi_validator.investments.portfolio import PortfolioSummary


def render_portfolio_cards(*, summary: PortfolioSummary, tooltips: dict[str, str]) -> None:
    col1, col2, col3, col4, col5 = st.columns(5)

    col1.metric(
        "Projects",
        format_count(summary.project_count),
        help=tooltips["project_count_card"],
    )
    col2.metric(
        "Validated",
        format_count(summary.validated_count),
        help=tooltips["validated_count_card"],
    )
    col3.metric(
        "Burning Cash",
        format_count(summary.burning_count),
        help=tooltips["burning_count_card"],
    )
    col4.metric(
        "Total Cost",
        format_currency(summary.total_cost),
        help=tooltips["total_cost_card"],
    )
    col5.metric(
        "Total Revenue",
        format_currency(summary.total_revenue),
        help=tooltips["total_revenue_card"],
    )
