# This file renders the account creation screen and its confirmation panel.

from __future__ import annotations

import logging

import streamlit as st

from roi_validator.app_ui import ui_text
from roi_validator.app_ui.app_state import AppState, navigate
from roi_validator.app_ui.components.layout import centered_panel
from roi_validator.backend.errors import RemoteOperationError
from roi_validator.investments.validation import CredentialValidationError, validate_credentials
from roi_validator.routing.routes import Route

LOGGER = logging.getLogger("app_ui")

SIGNUP_COMPLETE_KEY = "signup_complete"


def _render_success(state: AppState) -> None:
    with centered_panel():
        st.header(ui_text.SIGNUP_SUCCESS_TITLE)
        st.write(ui_text.SIGNUP_SUCCESS_BODY)
        if st.button(ui_text.SIGNUP_SUCCESS_CTA, type="primary", use_container_width=True):
            st.session_state.pop(SIGNUP_COMPLETE_KEY, None)
            navigate(state, Route.LOGIN.value)


def render(state: AppState) -> None:
    if st.session_state.get(SIGNUP_COMPLETE_KEY):
        _render_success(state)
        return

    min_length = state.config.password_min_length
    with centered_panel():
        st.header(ui_text.SIGNUP_TITLE)
        st.caption(ui_text.SIGNUP_SUBTITLE)

        with st.form("signup"):
            email = st.text_input("Email", placeholder="your@email.com")
            password = st.text_input(
                "Password",
                type="password",
                help=f"Minimum {min_length} characters",
            )
            submitted = st.form_submit_button(ui_text.SIGNUP_SUBMIT, type="primary", use_container_width=True)

        if submitted:
            try:
                email, password = validate_credentials(email, password, min_password_length=min_length)
                signed_in = state.auth_flow.sign_up(email, password)
            except CredentialValidationError as exc:
                st.error(str(exc))
            except RemoteOperationError as exc:
                LOGGER.warning("sign-up failed: %s", exc.message)
                st.error(exc.message)
            else:
                if signed_in:
                    navigate(state, Route.DASHBOARD.value)
                else:
                    st.session_state[SIGNUP_COMPLETE_KEY] = True
                    st.rerun()

        st.caption(ui_text.SIGNUP_LOGIN_PROMPT)
        if st.button(ui_text.SIGNUP_LOGIN_LINK, type="tertiary"):
            navigate(state, Route.LOGIN.value)
