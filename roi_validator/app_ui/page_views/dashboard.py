# This file renders the signed-in dashboard: header with logout, the add form,
# portfolio metrics, and the investment list with edit and delete.
# The list is kept in session state and replaced by a fresh fetch after every successful write.

from __future__ import annotations

import logging

import streamlit as st

from roi_validator.app_ui import ui_text
from roi_validator.app_ui.app_state import AppState, build_data_client, navigate
from roi_validator.app_ui.components.edit_dialog import open_edit_dialog
from roi_validator.app_ui.components.investment_form import (
    render_investment_form,
    reset_investment_form,
)
from roi_validator.app_ui.components.investment_list import render_investment_list
from roi_validator.app_ui.components.summary_cards import render_portfolio_cards
from roi_validator.app_ui.data_access import InvestmentDataAccess
from roi_validator.app_ui.tooltips import TOOLTIPS
from roi_validator.backend.errors import RemoteOperationError
from roi_validator.investments.models import Investment
from roi_validator.investments.portfolio import summarize_portfolio
from roi_validator.investments.validation import InvestmentValidationError, parse_investment_form
from roi_validator.routing.routes import Route

LOGGER = logging.getLogger("app_ui")

INVESTMENTS_KEY = "investments"
LIST_ERROR_KEY = "investment_list_error"


def _store(investments: list[Investment]) -> None:
    st.session_state[INVESTMENTS_KEY] = investments
    st.session_state.pop(LIST_ERROR_KEY, None)


def clear_dashboard_state() -> None:
    for key in (INVESTMENTS_KEY, LIST_ERROR_KEY):
        st.session_state.pop(key, None)


def _current_investments(data_access: InvestmentDataAccess) -> list[Investment]:
    if INVESTMENTS_KEY not in st.session_state:
        try:
            _store(data_access.load())
        except RemoteOperationError as exc:
            LOGGER.warning("investment list fetch failed: %s", exc.message)
            st.session_state[LIST_ERROR_KEY] = exc.message
            return []
    return list(st.session_state[INVESTMENTS_KEY])


def _render_header(state: AppState) -> None:
    title_col, user_col, logout_col = st.columns([4, 2, 1])
    title_col.title(ui_text.APP_TITLE)
    user_col.caption(state.session_store.current.email or "")
    if logout_col.button(ui_text.LOGOUT, use_container_width=True):
        state.auth_flow.sign_out()
        clear_dashboard_state()
        navigate(state, Route.HOME.value)


def _handle_add(data_access: InvestmentDataAccess) -> None:
    form_input = render_investment_form(tooltips=TOOLTIPS)
    if form_input is None:
        return
    try:
        fields = parse_investment_form(
            form_input.project_name, form_input.cost_text, form_input.revenue_text
        )
        investments = data_access.add(fields)
    except InvestmentValidationError as exc:
        st.error(str(exc))
        return
    except RemoteOperationError as exc:
        LOGGER.warning("investment create failed: %s", exc.message)
        st.error(exc.message)
        return

    _store(investments)
    reset_investment_form()
    st.rerun()


def render(state: AppState) -> None:
    identity = state.session_store.current.identity
    if identity is None:
        # The router only selects this screen for an authenticated session.
        return

    data_access = InvestmentDataAccess(data_client=build_data_client(state), owner_id=identity)

    _render_header(state)
    st.header(ui_text.DASHBOARD_TITLE)
    st.caption(ui_text.DASHBOARD_SUBTITLE)

    form_col, list_col = st.columns([1, 2], gap="large")

    with form_col:
        _handle_add(data_access)

    with list_col:
        investments = _current_investments(data_access)
        list_error = st.session_state.get(LIST_ERROR_KEY)
        if list_error:
            st.error(list_error)

        render_portfolio_cards(summary=summarize_portfolio(investments), tooltips=TOOLTIPS)
        action = render_investment_list(investments, roi_help=TOOLTIPS["roi_formula"])

    if action is None:
        return
    if action.kind == "edit":
        open_edit_dialog(action.investment, data_access, _store)
        return

    try:
        _store(data_access.delete(action.investment.id))
    except RemoteOperationError as exc:
        LOGGER.warning("investment delete failed id=%s: %s", action.investment.id, exc.message)
        st.error(exc.message)
        return
    st.rerun()
