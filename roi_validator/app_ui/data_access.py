# This file is the single data interface for the dashboard screen.
# Any successful write is followed by an unconditional re-fetch of the owner's list;
# there is no local cache and no conflict detection.

from __future__ import annotations

import logging

from roi_validator.backend.data_client import InvestmentDataClient
from roi_validator.investments.models import Investment, InvestmentFields

LOGGER = logging.getLogger("app_ui")


class InvestmentDataAccess:
    def __init__(self, *, data_client: InvestmentDataClient, owner_id: str) -> None:
        self.data_client = data_client
        self.owner_id = owner_id

    def load(self) -> list[Investment]:
        investments = self.data_client.list_investments(self.owner_id)
        LOGGER.debug("loaded investments owner_id=%s count=%s", self.owner_id, len(investments))
        return investments

    def add(self, fields: InvestmentFields) -> list[Investment]:
        self.data_client.create_investment(fields, owner_id=self.owner_id)
        return self.load()

    def update(self, investment_id: str, fields: InvestmentFields) -> list[Investment]:
        self.data_client.update_investment(investment_id, fields)
        return self.load()

    def delete(self, investment_id: str) -> list[Investment]:
        self.data_client.delete_investment(investment_id)
        return self.load()
