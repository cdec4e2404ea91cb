# This file provides the centered card layout shared by the auth screens.

from __future__ import annotations

import streamlit as st
from streamlit.delta_generator import DeltaGenerator


def centered_panel() -> DeltaGenerator:
    _, middle, _ = st.columns([1, 2, 1])
    return middle.container(border=True)
