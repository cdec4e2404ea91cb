# This file implements create/read/update/delete for rows in the `investments` table.
# Reads are ordered newest first; writes return nothing and callers re-fetch the list.

from __future__ import annotations

import logging
from typing import Any

import requests

from roi_validator.backend.errors import BackendUnavailableError
from roi_validator.backend.rest import SupabaseRestClient
from roi_validator.investments.models import Investment, InvestmentFields

LOGGER = logging.getLogger("backend")

INVESTMENTS_PATH = "/rest/v1/investments"


class InvestmentDataClient(SupabaseRestClient):
    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        access_token: str | None = None,
        timeout_seconds: int = 8,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            timeout_seconds=timeout_seconds,
            session=session,
        )
        self.access_token = access_token

    def list_investments(self, owner_id: str) -> list[Investment]:
        payload = self._request(
            "GET",
            INVESTMENTS_PATH,
            params={
                "select": "*",
                "user_id": f"eq.{owner_id}",
                "order": "created_at.desc",
            },
            access_token=self.access_token,
        )
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise BackendUnavailableError("Unexpected payload shape from investments list")
        return [Investment.model_validate(row) for row in payload]

    def create_investment(self, fields: InvestmentFields, *, owner_id: str) -> None:
        body: dict[str, Any] = {**fields.to_payload(), "user_id": owner_id}
        self._request(
            "POST",
            INVESTMENTS_PATH,
            json_body=[body],
            access_token=self.access_token,
            extra_headers={"Prefer": "return=minimal"},
        )
        LOGGER.info("investment created owner_id=%s", owner_id)

    def update_investment(self, investment_id: str, fields: InvestmentFields) -> None:
        self._request(
            "PATCH",
            INVESTMENTS_PATH,
            params={"id": f"eq.{investment_id}"},
            json_body=fields.to_payload(),
            access_token=self.access_token,
            extra_headers={"Prefer": "return=minimal"},
        )
        LOGGER.info("investment updated id=%s", investment_id)

    def delete_investment(self, investment_id: str) -> None:
        self._request(
            "DELETE",
            INVESTMENTS_PATH,
            params={"id": f"eq.{investment_id}"},
            access_token=self.access_token,
        )
        LOGGER.info("investment deleted id=%s", investment_id)
