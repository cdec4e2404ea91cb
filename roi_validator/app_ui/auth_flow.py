# This file connects the auth client to the session store.
# Successful sign-in and sign-out publish a new Session so the router re-evaluates;
# failures propagate as RemoteOperationError for the calling screen to display.

from __future__ import annotations

import logging

from roi_validator.backend.auth_client import AuthSession, SupabaseAuthClient
from roi_validator.backend.errors import RemoteOperationError
from roi_validator.routing.session import Session, SessionStore

LOGGER = logging.getLogger("app_ui")


class AuthFlow:
    def __init__(
        self,
        *,
        auth_client: SupabaseAuthClient,
        session_store: SessionStore,
        password_reset_redirect_url: str | None = None,
    ) -> None:
        self.auth_client = auth_client
        self.session_store = session_store
        self.password_reset_redirect_url = password_reset_redirect_url
        self.auth_session: AuthSession | None = None

    @property
    def access_token(self) -> str | None:
        return self.auth_session.access_token if self.auth_session else None

    def restore(self) -> None:
        """Resolve the initial loading session. Sessions do not outlive a browser session, so this is always signed out."""

        self._set(None)

    def sign_in(self, email: str, password: str) -> None:
        self._set(self.auth_client.sign_in(email, password))

    def sign_up(self, email: str, password: str) -> bool:
        """Create an account; returns True when the service confirmed it and signed the user in."""

        auth_session = self.auth_client.sign_up(email, password)
        if auth_session is None:
            return False
        self._set(auth_session)
        return True

    def request_password_reset(self, email: str) -> None:
        self.auth_client.request_password_reset(email, redirect_to=self.password_reset_redirect_url)

    def sign_out(self) -> None:
        token = self.access_token
        try:
            if token:
                self.auth_client.sign_out(token)
        except RemoteOperationError as exc:
            LOGGER.warning("sign-out request failed: %s", exc.message)
        finally:
            self._set(None)

    def _set(self, auth_session: AuthSession | None) -> None:
        self.auth_session = auth_session
        if auth_session is None:
            self.session_store.publish(Session.anonymous())
        else:
            self.session_store.publish(Session.signed_in(auth_session.user_id, auth_session.email))
