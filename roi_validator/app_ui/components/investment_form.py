# This file renders the "Add Investment" form.
# Widget keys carry a version number; bumping it after a successful save gives the user
# an empty form on the next rerun while a failed save keeps what they typed.

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from roi_validator.app_ui import ui_text

_VERSION_KEY = "investment_form_version"


@dataclass(frozen=True)
class InvestmentFormInput:
    project_name: str
    cost_text: str
    revenue_text: str


def reset_investment_form() -> None:
    st.session_state[_VERSION_KEY] = int(st.session_state.get(_VERSION_KEY, 0)) + 1


def render_investment_form(*, tooltips: dict[str, str]) -> InvestmentFormInput | None:
    version = int(st.session_state.get(_VERSION_KEY, 0))

    st.subheader(ui_text.FORM_TITLE)
    with st.form(f"add-investment-{version}"):
        project_name = st.text_input(
            ui_text.PROJECT_NAME_LABEL,
            placeholder=ui_text.PROJECT_NAME_PLACEHOLDER,
            key=f"project_name_{version}",
        )
        cost_text = st.text_input(
            ui_text.COST_LABEL,
            placeholder=ui_text.COST_PLACEHOLDER,
            help=tooltips["cost_input"],
            key=f"cost_{version}",
        )
        revenue_text = st.text_input(
            ui_text.REVENUE_LABEL,
            placeholder=ui_text.REVENUE_PLACEHOLDER,
            help=tooltips["revenue_input"],
            key=f"revenue_{version}",
        )
        submitted = st.form_submit_button(ui_text.FORM_SUBMIT, use_container_width=True)

    if not submitted:
        return None
    return InvestmentFormInput(
        project_name=project_name,
        cost_text=cost_text,
        revenue_text=revenue_text,
    )
