# This package holds one renderer per screen the router can select.

__all__ = ["dashboard", "forgot_password", "landing", "login", "signup"]
