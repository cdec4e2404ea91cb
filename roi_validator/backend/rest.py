# This file holds the HTTP plumbing shared by the auth and data clients.
# It attaches the project key, converts transport failures into one exception type,
# and pulls a readable message out of the different error payload shapes the service returns.

from __future__ import annotations

import logging
from typing import Any

import requests

from roi_validator.backend.errors import BackendUnavailableError, RemoteOperationError

LOGGER = logging.getLogger("backend")

_MESSAGE_KEYS = ("error_description", "msg", "message", "error")


def extract_error_message(payload: Any, *, status_code: int) -> str:
    if isinstance(payload, dict):
        for key in _MESSAGE_KEYS:
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    return f"Request failed with status {status_code}"


class SupabaseRestClient:
    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout_seconds: int = 8,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def _headers(self, access_token: str | None = None, extra: dict[str, str] | None = None) -> dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {access_token or self.api_key}",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any | None = None,
        access_token: str | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json_body,
                headers=self._headers(access_token, extra_headers),
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            LOGGER.warning("request failed method=%s path=%s error=%s", method, path, exc)
            raise BackendUnavailableError(f"Unable to reach the server: {exc}") from exc

        if response.status_code == 204 or not response.content:
            payload: Any = None
        else:
            try:
                payload = response.json()
            except ValueError as exc:
                if response.status_code >= 400:
                    payload = None
                else:
                    raise BackendUnavailableError(f"Server did not return valid JSON for {path}") from exc

        if response.status_code >= 500:
            message = extract_error_message(payload, status_code=response.status_code)
            LOGGER.warning("server error method=%s path=%s status=%s", method, path, response.status_code)
            raise BackendUnavailableError(message, status_code=response.status_code)
        if response.status_code >= 400:
            message = extract_error_message(payload, status_code=response.status_code)
            LOGGER.info("request rejected method=%s path=%s status=%s", method, path, response.status_code)
            raise RemoteOperationError(message, status_code=response.status_code)
        return payload
