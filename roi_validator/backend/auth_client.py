# This file implements the auth operations used by the login, signup, reset, and logout flows.
# Tokens stay in the returned AuthSession and are never logged.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from roi_validator.backend.errors import RemoteOperationError
from roi_validator.backend.rest import SupabaseRestClient

LOGGER = logging.getLogger("backend")


@dataclass(frozen=True)
class AuthSession:
    user_id: str
    email: str | None
    access_token: str
    refresh_token: str | None = None


def _session_from_payload(payload: Any) -> AuthSession | None:
    if not isinstance(payload, dict):
        return None
    access_token = payload.get("access_token")
    user = payload.get("user")
    if not access_token or not isinstance(user, dict) or not user.get("id"):
        return None
    return AuthSession(
        user_id=str(user["id"]),
        email=user.get("email"),
        access_token=str(access_token),
        refresh_token=payload.get("refresh_token"),
    )


class SupabaseAuthClient(SupabaseRestClient):
    def sign_in(self, email: str, password: str) -> AuthSession:
        payload = self._request(
            "POST",
            "/auth/v1/token",
            params={"grant_type": "password"},
            json_body={"email": email, "password": password},
        )
        session = _session_from_payload(payload)
        if session is None:
            raise RemoteOperationError("Sign-in response did not include a session")
        LOGGER.info("sign-in succeeded user_id=%s", session.user_id)
        return session

    def sign_up(self, email: str, password: str) -> AuthSession | None:
        """Create an account; returns None while email confirmation is pending."""

        payload = self._request(
            "POST",
            "/auth/v1/signup",
            json_body={"email": email, "password": password},
        )
        session = _session_from_payload(payload)
        LOGGER.info("sign-up accepted confirmed=%s", session is not None)
        return session

    def sign_out(self, access_token: str) -> None:
        self._request("POST", "/auth/v1/logout", access_token=access_token)

    def request_password_reset(self, email: str, *, redirect_to: str | None = None) -> None:
        params = {"redirect_to": redirect_to} if redirect_to else None
        self._request("POST", "/auth/v1/recover", params=params, json_body={"email": email})
