# This module maps (path, session) to the screen to render.
# `resolve_route` is a total, side-effect free function. `SessionRouter` re-runs it on
# every navigation or session notification and performs the single root redirect:
# an authenticated visitor on "/" is moved to "/dashboard". Once moved, the path is no
# longer "/", so evaluating the same state again cannot redirect a second time.

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from roi_validator.routing.navigation import Navigator
from roi_validator.routing.routes import (
    AUTH_FORM_ROUTES,
    SCREEN_FOR_ROUTE,
    Route,
    Screen,
    route_for_path,
)
from roi_validator.routing.session import Session, SessionStore

LOGGER = logging.getLogger("routing")

DecisionListener = Callable[["RouteDecision"], None]


@dataclass(frozen=True)
class RouteDecision:
    screen: Screen
    redirect_to: str | None = None


def resolve_route(path: str, session: Session) -> RouteDecision:
    if session.is_loading:
        return RouteDecision(screen=Screen.LOADING)

    route = route_for_path(path)
    authenticated = session.is_authenticated

    if route in AUTH_FORM_ROUTES:
        screen = Screen.DASHBOARD if authenticated else SCREEN_FOR_ROUTE[route]
    elif route is Route.DASHBOARD:
        screen = Screen.DASHBOARD if authenticated else Screen.LOGIN
    else:
        screen = Screen.DASHBOARD if authenticated else Screen.HOME

    redirect_to = Route.DASHBOARD.value if authenticated and path == Route.HOME.value else None
    return RouteDecision(screen=screen, redirect_to=redirect_to)


class SessionRouter:
    """Re-evaluates the route whenever the path or the session changes."""

    def __init__(self, *, navigator: Navigator, session_store: SessionStore) -> None:
        self.navigator = navigator
        self.session_store = session_store
        self._decision_listeners: list[DecisionListener] = []
        self._unsubscribers = [
            navigator.subscribe(lambda _path: self._on_change()),
            session_store.subscribe(lambda _session: self._on_change()),
        ]

    def evaluate(self) -> RouteDecision:
        path = self.navigator.current_path
        decision = resolve_route(path, self.session_store.current)
        LOGGER.debug("route resolved path=%s screen=%s", path, decision.screen.value)

        if decision.redirect_to is not None:
            LOGGER.info("redirecting path=%s to=%s", path, decision.redirect_to)
            # go_to notifies subscribers, which re-enters evaluate() with the new path.
            self.navigator.go_to(decision.redirect_to)
        return decision

    def on_decision(self, listener: DecisionListener) -> Callable[[], None]:
        self._decision_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._decision_listeners:
                self._decision_listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._decision_listeners = []

    def _on_change(self) -> None:
        decision = self.evaluate()
        for listener in list(self._decision_listeners):
            listener(decision)
