# This file keeps the per-browser-session objects (session store, navigator, router, auth flow)
# in Streamlit session state so they survive reruns. The visible path lives in the
# `path` query parameter; a query parameter that differs from the navigator on rerun is
# treated as navigation that happened outside the app (back/forward, edited URL).

from __future__ import annotations

from dataclasses import dataclass

import requests
import streamlit as st

from roi_validator.app_ui.app_config import AppConfig
from roi_validator.app_ui.auth_flow import AuthFlow
from roi_validator.backend.auth_client import SupabaseAuthClient
from roi_validator.backend.data_client import InvestmentDataClient
from roi_validator.routing.navigation import Navigator
from roi_validator.routing.session import SessionStore
from roi_validator.routing.session_router import SessionRouter

STATE_KEY = "roi_app_state"
PATH_PARAM = "path"


@dataclass
class AppState:
    config: AppConfig
    session_store: SessionStore
    navigator: Navigator
    router: SessionRouter
    auth_flow: AuthFlow
    # One connection pool per browser session; its cookie jar is never shared.
    http_session: requests.Session


def _read_location() -> str:
    return st.query_params.get(PATH_PARAM, "/") or "/"


def _write_location(path: str) -> None:
    st.query_params[PATH_PARAM] = path


def get_app_state(config: AppConfig) -> AppState:
    state = st.session_state.get(STATE_KEY)
    if isinstance(state, AppState):
        return state

    session_store = SessionStore()
    navigator = Navigator(_read_location(), location_writer=_write_location)
    http_session = requests.Session()
    auth_client = SupabaseAuthClient(
        base_url=config.supabase_url,
        api_key=config.supabase_anon_key,
        timeout_seconds=config.request_timeout_seconds,
        session=http_session,
    )
    state = AppState(
        config=config,
        session_store=session_store,
        navigator=navigator,
        router=SessionRouter(navigator=navigator, session_store=session_store),
        auth_flow=AuthFlow(
            auth_client=auth_client,
            session_store=session_store,
            password_reset_redirect_url=config.password_reset_redirect_url,
        ),
        http_session=http_session,
    )
    st.session_state[STATE_KEY] = state
    return state


def sync_path_from_location(state: AppState) -> None:
    state.navigator.handle_external_change(_read_location())


def navigate(state: AppState, path: str) -> None:
    state.navigator.go_to(path)
    st.rerun()


def build_data_client(state: AppState) -> InvestmentDataClient:
    return InvestmentDataClient(
        base_url=state.config.supabase_url,
        api_key=state.config.supabase_anon_key,
        access_token=state.auth_flow.access_token,
        timeout_seconds=state.config.request_timeout_seconds,
        session=state.http_session,
    )
