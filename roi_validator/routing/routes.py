# This file enumerates the known paths and the screens the app can render.

from __future__ import annotations

from enum import Enum


class Route(str, Enum):
    HOME = "/"
    LOGIN = "/login"
    SIGNUP = "/signup"
    FORGOT_PASSWORD = "/forgot-password"
    DASHBOARD = "/dashboard"


class Screen(str, Enum):
    LOADING = "loading"
    HOME = "home"
    LOGIN = "login"
    SIGNUP = "signup"
    FORGOT_PASSWORD = "forgot_password"
    DASHBOARD = "dashboard"


_ROUTES_BY_PATH: dict[str, Route] = {route.value: route for route in Route}

AUTH_FORM_ROUTES: frozenset[Route] = frozenset({Route.LOGIN, Route.SIGNUP, Route.FORGOT_PASSWORD})

SCREEN_FOR_ROUTE: dict[Route, Screen] = {
    Route.HOME: Screen.HOME,
    Route.LOGIN: Screen.LOGIN,
    Route.SIGNUP: Screen.SIGNUP,
    Route.FORGOT_PASSWORD: Screen.FORGOT_PASSWORD,
    Route.DASHBOARD: Screen.DASHBOARD,
}


def route_for_path(path: str | None) -> Route:
    """Match ``path`` exactly against the known routes; anything else is HOME."""

    return _ROUTES_BY_PATH.get(path or "", Route.HOME)
