# This test file verifies that auth outcomes are published to the session store
# and that the router follows them.

from __future__ import annotations

import pytest

from roi_validator.app_ui.auth_flow import AuthFlow
from roi_validator.backend.auth_client import AuthSession
from roi_validator.backend.errors import BackendUnavailableError, RemoteOperationError
from roi_validator.routing.navigation import Navigator
from roi_validator.routing.routes import Screen
from roi_validator.routing.session import Session, SessionStore
from roi_validator.routing.session_router import SessionRouter

_SIGNED_IN = AuthSession(user_id="user-1", email="user@example.com", access_token="access-1")


class _StubAuthClient:
    def __init__(
        self,
        *,
        fail_with: RemoteOperationError | None = None,
        sign_up_result: AuthSession | None = None,
    ) -> None:
        self.fail_with = fail_with
        self.sign_up_result = sign_up_result
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    def _record(self, name: str, *args: object) -> None:
        self.calls.append((name, args))
        if self.fail_with is not None:
            raise self.fail_with

    def sign_in(self, email: str, password: str) -> AuthSession:
        self._record("sign_in", email)
        return _SIGNED_IN

    def sign_up(self, email: str, password: str) -> AuthSession | None:
        self._record("sign_up", email)
        return self.sign_up_result

    def sign_out(self, access_token: str) -> None:
        self._record("sign_out", access_token)

    def request_password_reset(self, email: str, *, redirect_to: str | None = None) -> None:
        self._record("request_password_reset", email, redirect_to)


def _flow(client: _StubAuthClient) -> tuple[AuthFlow, SessionStore]:
    store = SessionStore()
    flow = AuthFlow(
        auth_client=client,  # type: ignore[arg-type]
        session_store=store,
        password_reset_redirect_url="http://localhost:8501/reset-password",
    )
    return flow, store


def test_restore_resolves_loading_to_anonymous_without_remote_calls() -> None:
    client = _StubAuthClient()
    flow, store = _flow(client)
    router = SessionRouter(navigator=Navigator("/dashboard"), session_store=store)
    assert router.evaluate().screen is Screen.LOADING

    flow.restore()

    assert store.current == Session.anonymous()
    assert router.evaluate().screen is Screen.LOGIN
    assert client.calls == []


def test_sign_in_publishes_session_and_router_redirects_from_root() -> None:
    client = _StubAuthClient()
    flow, store = _flow(client)
    flow.restore()
    navigator = Navigator("/")
    router = SessionRouter(navigator=navigator, session_store=store)

    flow.sign_in("user@example.com", "secret")

    assert store.current == Session.signed_in("user-1", "user@example.com")
    assert flow.access_token == "access-1"
    assert navigator.current_path == "/dashboard"
    assert router.evaluate().screen is Screen.DASHBOARD


def test_failed_sign_in_leaves_session_untouched() -> None:
    client = _StubAuthClient(fail_with=RemoteOperationError("Invalid login credentials"))
    flow, store = _flow(client)
    flow.restore()

    with pytest.raises(RemoteOperationError, match="Invalid login credentials"):
        flow.sign_in("user@example.com", "wrong")

    assert store.current == Session.anonymous()


def test_sign_up_pending_confirmation_does_not_sign_in() -> None:
    client = _StubAuthClient()
    flow, store = _flow(client)
    flow.restore()

    signed_in = flow.sign_up("new@example.com", "secret1")

    assert signed_in is False
    assert store.current.is_authenticated is False
    assert flow.access_token is None


def test_sign_up_with_confirmed_account_signs_in_and_leaves_signup() -> None:
    confirmed = AuthSession(user_id="user-9", email="new@example.com", access_token="access-9")
    client = _StubAuthClient(sign_up_result=confirmed)
    flow, store = _flow(client)
    flow.restore()
    navigator = Navigator("/signup")
    router = SessionRouter(navigator=navigator, session_store=store)

    signed_in = flow.sign_up("new@example.com", "secret1")

    assert signed_in is True
    assert store.current == Session.signed_in("user-9", "new@example.com")
    assert flow.access_token == "access-9"
    assert router.evaluate().screen is Screen.DASHBOARD


def test_password_reset_uses_configured_redirect() -> None:
    client = _StubAuthClient()
    flow, _ = _flow(client)

    flow.request_password_reset("user@example.com")

    assert client.calls == [
        ("request_password_reset", ("user@example.com", "http://localhost:8501/reset-password"))
    ]


def test_sign_out_clears_session_even_when_request_fails() -> None:
    client = _StubAuthClient()
    flow, store = _flow(client)
    flow.sign_in("user@example.com", "secret")
    client.fail_with = BackendUnavailableError("Unable to reach the server")

    flow.sign_out()

    assert store.current == Session.anonymous()
    assert flow.access_token is None
    assert client.calls[-1] == ("sign_out", ("access-1",))
