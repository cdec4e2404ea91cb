# This file is the Streamlit entrypoint.
# Each rerun syncs the path from the URL, lets the router pick a screen, and renders it.

from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from roi_validator.app_ui import ui_text
from roi_validator.app_ui.app_config import load_app_config
from roi_validator.app_ui.app_state import AppState, get_app_state, sync_path_from_location
from roi_validator.app_ui.page_views import dashboard, forgot_password, landing, login, signup
from roi_validator.common.logging import configure_logging
from roi_validator.common.settings import get_settings
from roi_validator.routing.routes import Screen

SCREEN_RENDERERS: dict[Screen, Callable[[AppState], None]] = {
    Screen.HOME: landing.render,
    Screen.LOGIN: login.render,
    Screen.SIGNUP: signup.render,
    Screen.FORGOT_PASSWORD: forgot_password.render,
    Screen.DASHBOARD: dashboard.render,
}


def main() -> None:
    st.set_page_config(page_title=ui_text.APP_TITLE, layout="wide")
    configure_logging()

    config = load_app_config(get_settings())
    state = get_app_state(config)
    sync_path_from_location(state)

    decision = state.router.evaluate()
    if decision.screen is Screen.LOADING:
        with st.spinner(ui_text.LOADING):
            state.auth_flow.restore()
        st.rerun()

    SCREEN_RENDERERS[decision.screen](state)


if __name__ == "__main__":
    main()
