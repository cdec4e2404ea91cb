# This file provides a fake requests session shared by the backend client tests.

from __future__ import annotations

import json
from typing import Any


class FakeResponse:
    def __init__(self, *, status_code: int, payload: Any | None = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        if text is not None:
            self.content = text.encode()
        elif payload is None:
            self.content = b""
        else:
            self.content = json.dumps(payload).encode()

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FakeSession:
    def __init__(
        self, responses: list[FakeResponse] | None = None, raise_error: Exception | None = None
    ) -> None:
        self.responses = responses or []
        self.raise_error = raise_error
        self.calls: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.raise_error is not None:
            raise self.raise_error
        return self.responses.pop(0)
