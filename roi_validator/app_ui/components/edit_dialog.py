# This file renders the modal used to edit an existing investment.

from __future__ import annotations

import logging
from collections.abc import Callable

import streamlit as st

from roi_validator.app_ui import ui_text
from roi_validator.app_ui.data_access import InvestmentDataAccess
from roi_validator.backend.errors import RemoteOperationError
from roi_validator.investments.models import Investment
from roi_validator.investments.validation import InvestmentValidationError, parse_investment_form

LOGGER = logging.getLogger("app_ui")


def _amount_text(value: float) -> str:
    number = float(value)
    return str(int(number)) if number.is_integer() else repr(number)


@st.dialog(ui_text.EDIT_TITLE)
def open_edit_dialog(
    investment: Investment,
    data_access: InvestmentDataAccess,
    on_saved: Callable[[list[Investment]], None],
) -> None:
    current = investment.editable_fields()
    with st.form(f"edit-investment-{investment.id}"):
        project_name = st.text_input(ui_text.PROJECT_NAME_LABEL, value=current.project_name)
        cost_text = st.text_input(ui_text.COST_LABEL, value=_amount_text(current.cost))
        revenue_text = st.text_input(ui_text.REVENUE_LABEL, value=_amount_text(current.revenue))
        cancel_col, update_col = st.columns(2)
        cancelled = cancel_col.form_submit_button(ui_text.EDIT_CANCEL, use_container_width=True)
        submitted = update_col.form_submit_button(
            ui_text.EDIT_SUBMIT, type="primary", use_container_width=True
        )

    if cancelled:
        st.rerun()
    if not submitted:
        return

    try:
        fields = parse_investment_form(project_name, cost_text, revenue_text)
        investments = data_access.update(investment.id, fields)
    except InvestmentValidationError as exc:
        st.error(str(exc))
        return
    except RemoteOperationError as exc:
        LOGGER.warning("investment update failed id=%s: %s", investment.id, exc.message)
        st.error(exc.message)
        return

    on_saved(investments)
    st.rerun()
