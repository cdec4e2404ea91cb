# This test file checks parsing of raw investment and credential form input.

from __future__ import annotations

import pytest

from roi_validator.investments.validation import (
    INVALID_NUMBERS_MESSAGE,
    MISSING_PROJECT_NAME_MESSAGE,
    CredentialValidationError,
    InvestmentValidationError,
    parse_amount,
    parse_investment_form,
    validate_credentials,
)


def test_parse_investment_form_returns_fields() -> None:
    fields = parse_investment_form("  Mobile App Launch ", "10000", "15000.50")

    assert fields.project_name == "Mobile App Launch"
    assert fields.cost == 10000.0
    assert fields.revenue == 15000.5


def test_parse_amount_accepts_currency_formatting() -> None:
    assert parse_amount(" $12,500.25 ") == 12500.25
    assert parse_amount("-300") == -300.0


@pytest.mark.parametrize("text", ["", "   ", "abc", "12abc", "nan", "inf", "-Infinity", "1e400", None])
def test_parse_amount_rejects_non_numbers(text: str | None) -> None:
    with pytest.raises(InvestmentValidationError, match=INVALID_NUMBERS_MESSAGE):
        parse_amount(text)


def test_parse_investment_form_requires_project_name() -> None:
    with pytest.raises(InvestmentValidationError, match=MISSING_PROJECT_NAME_MESSAGE):
        parse_investment_form("   ", "1", "2")


def test_parse_investment_form_reports_bad_revenue() -> None:
    with pytest.raises(InvestmentValidationError, match=INVALID_NUMBERS_MESSAGE):
        parse_investment_form("Kiosk", "1000", "lots")


def test_validate_credentials_trims_email() -> None:
    assert validate_credentials(" a@b.co ", "secret") == ("a@b.co", "secret")


def test_validate_credentials_requires_both_fields() -> None:
    with pytest.raises(CredentialValidationError, match="Email is required"):
        validate_credentials("", "secret")
    with pytest.raises(CredentialValidationError, match="Password is required"):
        validate_credentials("a@b.co", "")


def test_validate_credentials_enforces_min_length_when_given() -> None:
    with pytest.raises(CredentialValidationError, match="at least 6 characters"):
        validate_credentials("a@b.co", "12345", min_password_length=6)
    assert validate_credentials("a@b.co", "123456", min_password_length=6)[1] == "123456"
