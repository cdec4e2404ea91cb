# This test file validates the investment data client request shapes and error handling.

from __future__ import annotations

import pytest

from roi_validator.backend.data_client import InvestmentDataClient
from roi_validator.backend.errors import BackendUnavailableError, RemoteOperationError
from roi_validator.investments.models import InvestmentFields
from tests.backend.support import FakeResponse, FakeSession

BASE_URL = "https://example.supabase.co"


def _client(session: FakeSession) -> InvestmentDataClient:
    return InvestmentDataClient(
        base_url=BASE_URL,
        api_key="anon-key",
        access_token="access-1",
        session=session,
    )


def _fields() -> InvestmentFields:
    return InvestmentFields(project_name="Kiosk", cost=1000.0, revenue=1500.0)


def test_list_investments_filters_owner_and_orders_newest_first() -> None:
    session = FakeSession(
        responses=[
            FakeResponse(
                status_code=200,
                payload=[
                    {
                        "id": "2",
                        "project_name": "Newer",
                        "cost": 100,
                        "revenue": 150,
                        "created_at": "2026-03-02T00:00:00+00:00",
                        "user_id": "user-1",
                    },
                    {
                        "id": "1",
                        "project_name": "Older",
                        "cost": 100,
                        "revenue": 50,
                        "created_at": "2026-03-01T00:00:00+00:00",
                        "user_id": "user-1",
                    },
                ],
            )
        ]
    )

    investments = _client(session).list_investments("user-1")

    assert [investment.id for investment in investments] == ["2", "1"]
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == f"{BASE_URL}/rest/v1/investments"
    assert call["params"] == {
        "select": "*",
        "user_id": "eq.user-1",
        "order": "created_at.desc",
    }
    assert call["headers"]["Authorization"] == "Bearer access-1"


def test_create_investment_sends_owner() -> None:
    session = FakeSession(responses=[FakeResponse(status_code=201)])

    _client(session).create_investment(_fields(), owner_id="user-1")

    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["json"] == [
        {"project_name": "Kiosk", "cost": 1000.0, "revenue": 1500.0, "user_id": "user-1"}
    ]
    assert call["headers"]["Prefer"] == "return=minimal"


def test_update_investment_targets_row_by_id() -> None:
    session = FakeSession(responses=[FakeResponse(status_code=204)])

    _client(session).update_investment("42", _fields())

    call = session.calls[0]
    assert call["method"] == "PATCH"
    assert call["params"] == {"id": "eq.42"}
    assert call["json"] == {"project_name": "Kiosk", "cost": 1000.0, "revenue": 1500.0}


def test_delete_investment_targets_row_by_id() -> None:
    session = FakeSession(responses=[FakeResponse(status_code=204)])

    _client(session).delete_investment("42")

    assert session.calls[0]["method"] == "DELETE"
    assert session.calls[0]["params"] == {"id": "eq.42"}


def test_row_level_security_rejection_is_reported_verbatim() -> None:
    message = 'new row violates row-level security policy for table "investments"'
    session = FakeSession(
        responses=[FakeResponse(status_code=403, payload={"code": "42501", "message": message})]
    )

    with pytest.raises(RemoteOperationError) as exc_info:
        _client(session).create_investment(_fields(), owner_id="someone-else")

    assert exc_info.value.message == message
    assert not isinstance(exc_info.value, BackendUnavailableError)


def test_unexpected_list_payload_raises_unavailable() -> None:
    session = FakeSession(responses=[FakeResponse(status_code=200, payload={"data": []})])

    with pytest.raises(BackendUnavailableError):
        _client(session).list_investments("user-1")
