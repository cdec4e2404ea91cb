# This file renders the public landing screen.

from __future__ import annotations

import streamlit as st

from roi_validator.app_ui import ui_text
from roi_validator.app_ui.app_state import AppState, navigate
from roi_validator.routing.routes import Route


def render(state: AppState) -> None:
    st.title(ui_text.LANDING_TITLE)
    st.subheader(ui_text.LANDING_SUBTITLE)

    if st.button(ui_text.LANDING_CTA, type="primary"):
        navigate(state, Route.LOGIN.value)

    columns = st.columns(len(ui_text.LANDING_FEATURES))
    for column, (title, description) in zip(columns, ui_text.LANDING_FEATURES):
        with column.container(border=True):
            st.markdown(f"#### {title}")
            st.caption(description)
