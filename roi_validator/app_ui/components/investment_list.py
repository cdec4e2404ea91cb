# This file renders the investment cards with their ROI verdict and edit/delete actions.
# It only reports which action was clicked; the dashboard screen performs it.

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

import streamlit as st

from roi_validator.app_ui import ui_text
from roi_validator.app_ui.formatting import format_currency, format_roi_percent, roi_color
from roi_validator.investments.models import Investment
from roi_validator.investments.portfolio import verdict_label


@dataclass(frozen=True)
class ListAction:
    kind: Literal["edit", "delete"]
    investment: Investment


def render_investment_list(
    investments: Sequence[Investment],
    *,
    roi_help: str,
) -> ListAction | None:
    if not investments:
        with st.container(border=True):
            st.markdown(f"#### {ui_text.EMPTY_INVESTMENTS_TITLE}")
            st.caption(ui_text.EMPTY_INVESTMENTS_BODY)
        return None

    st.subheader(ui_text.LIST_TITLE)
    action: ListAction | None = None

    for investment in investments:
        roi = investment.roi
        color = roi_color(roi.is_validated)
        with st.container(border=True):
            header, badge = st.columns([3, 1])
            header.markdown(f"#### {investment.project_name}")
            amounts = (
                f"Cost: {format_currency(investment.cost)} · "
                f"Revenue: {format_currency(investment.revenue)}"
            )
            # Streamlit markdown reads bare dollar signs as LaTeX delimiters.
            header.caption(amounts.replace("$", "\\$"))
            badge.markdown(f":{color}-background[**{verdict_label(roi.is_validated)}**]")

            value_col, edit_col, delete_col = st.columns([4, 1, 1])
            value_col.caption(ui_text.ROI_CAPTION, help=roi_help)
            value_col.markdown(f"### :{color}[{format_roi_percent(roi.roi_percent)}]")
            if edit_col.button("Edit", key=f"edit-{investment.id}", use_container_width=True):
                action = ListAction(kind="edit", investment=investment)
            if delete_col.button("Delete", key=f"delete-{investment.id}", use_container_width=True):
                action = ListAction(kind="delete", investment=investment)

    return action
