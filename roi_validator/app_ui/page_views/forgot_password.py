# This file renders the password reset request screen.

from __future__ import annotations

import logging

import streamlit as st

from roi_validator.app_ui import ui_text
from roi_validator.app_ui.app_state import AppState, navigate
from roi_validator.app_ui.components.layout import centered_panel
from roi_validator.backend.errors import RemoteOperationError
from roi_validator.routing.routes import Route

LOGGER = logging.getLogger("app_ui")

RESET_SENT_KEY = "password_reset_sent_to"


def render(state: AppState) -> None:
    sent_to = st.session_state.get(RESET_SENT_KEY)
    if sent_to:
        with centered_panel():
            st.header(ui_text.RESET_SUCCESS_TITLE)
            st.write(ui_text.RESET_SUCCESS_BODY.format(email=sent_to))
            if st.button(ui_text.RESET_SUCCESS_CTA, type="primary", use_container_width=True):
                st.session_state.pop(RESET_SENT_KEY, None)
                navigate(state, Route.LOGIN.value)
        return

    with centered_panel():
        if st.button(ui_text.RESET_BACK, type="tertiary"):
            navigate(state, Route.LOGIN.value)
        st.header(ui_text.RESET_TITLE)
        st.caption(ui_text.RESET_SUBTITLE)

        with st.form("forgot-password"):
            email = st.text_input("Email", placeholder="your@email.com")
            submitted = st.form_submit_button(ui_text.RESET_SUBMIT, type="primary", use_container_width=True)

        if submitted:
            email = email.strip()
            if not email:
                st.error("Email is required")
                return
            try:
                state.auth_flow.request_password_reset(email)
            except RemoteOperationError as exc:
                LOGGER.warning("password reset request failed: %s", exc.message)
                st.error(exc.message)
            else:
                st.session_state[RESET_SENT_KEY] = email
                st.rerun()
