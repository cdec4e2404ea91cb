# This package decides which screen to show for a path and an auth session.
# The resolver is pure; the router wires it to navigation and session notifications.

from roi_validator.routing.navigation import Navigator
from roi_validator.routing.routes import Route, Screen, route_for_path
from roi_validator.routing.session import Session, SessionStore
from roi_validator.routing.session_router import RouteDecision, SessionRouter, resolve_route

__all__ = [
    "Navigator",
    "Route",
    "RouteDecision",
    "Screen",
    "Session",
    "SessionRouter",
    "SessionStore",
    "resolve_route",
    "route_for_path",
]
