# This file models the auth session as seen by the router and a small observable store for it.
# Only the auth flow publishes new sessions; everything else reads or subscribes.

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

SessionListener = Callable[["Session"], None]


@dataclass(frozen=True)
class Session:
    identity: str | None
    is_loading: bool
    email: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @classmethod
    def loading(cls) -> Session:
        return cls(identity=None, is_loading=True)

    @classmethod
    def anonymous(cls) -> Session:
        return cls(identity=None, is_loading=False)

    @classmethod
    def signed_in(cls, identity: str, email: str | None = None) -> Session:
        return cls(identity=identity, is_loading=False, email=email)


class SessionStore:
    def __init__(self, initial: Session | None = None) -> None:
        self._current = initial or Session.loading()
        self._listeners: list[SessionListener] = []

    @property
    def current(self) -> Session:
        return self._current

    def publish(self, session: Session) -> None:
        self._current = session
        for listener in list(self._listeners):
            listener(session)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
