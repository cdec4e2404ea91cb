# This file tracks the visible path and tells subscribers when it changes.
# In-app navigation rewrites the location through an injected writer; changes that
# originate outside the app (back/forward) only update state and notify.

from __future__ import annotations

from collections.abc import Callable

PathListener = Callable[[str], None]
LocationWriter = Callable[[str], None]


class Navigator:
    def __init__(self, initial_path: str = "/", *, location_writer: LocationWriter | None = None) -> None:
        self._current_path = initial_path or "/"
        self._location_writer = location_writer
        self._listeners: list[PathListener] = []

    @property
    def current_path(self) -> str:
        return self._current_path

    def go_to(self, path: str) -> None:
        if self._location_writer is not None:
            self._location_writer(path)
        self._current_path = path
        self._notify()

    def handle_external_change(self, path: str) -> None:
        if path == self._current_path:
            return
        self._current_path = path
        self._notify()

    def subscribe(self, listener: PathListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._current_path)
