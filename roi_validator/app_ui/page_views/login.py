# This file renders the sign-in screen.

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


def render(state: AppState) -> None:
    with centered_panel():
        st.header(ui_text.LOGIN_TITLE)
        st.caption(ui_text.LOGIN_SUBTITLE)

        with st.form("login"):
            email = st.text_input("Email", placeholder="your@email.com")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button(ui_text.LOGIN_SUBMIT, type="primary", use_container_width=True)

        signed_in = False
        if submitted:
            try:
                email, password = validate_credentials(email, password)
                state.auth_flow.sign_in(email, password)
            except CredentialValidationError as exc:
                st.error(str(exc))
            except RemoteOperationError as exc:
                LOGGER.warning("sign-in failed: %s", exc.message)
                st.error(exc.message)
            else:
                signed_in = True

        if signed_in:
            navigate(state, Route.DASHBOARD.value)

        if st.button(ui_text.LOGIN_FORGOT_LINK, type="tertiary"):
            navigate(state, Route.FORGOT_PASSWORD.value)
        st.caption(ui_text.LOGIN_SIGNUP_PROMPT)
        if st.button(ui_text.LOGIN_SIGNUP_LINK, type="tertiary"):
            navigate(state, Route.SIGNUP.value)
