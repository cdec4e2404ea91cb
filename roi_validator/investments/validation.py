# This file validates raw form input before it reaches the ROI rule or the backend.
# Problems are reported as exceptions whose message is shown inline next to the form.

from __future__ import annotations

import math

from roi_validator.investments.models import InvestmentFields

INVALID_NUMBERS_MESSAGE = "Please enter valid numbers"
MISSING_PROJECT_NAME_MESSAGE = "Project name is required"


class InvestmentValidationError(ValueError):
    """Raised when investment form input cannot be turned into numbers."""


class CredentialValidationError(ValueError):
    """Raised when an auth form is incomplete."""


def parse_amount(text: str | None) -> float:
    cleaned = (text or "").strip().replace(",", "").replace("$", "")
    if not cleaned:
        raise InvestmentValidationError(INVALID_NUMBERS_MESSAGE)
    try:
        value = float(cleaned)
    except ValueError as exc:
        raise InvestmentValidationError(INVALID_NUMBERS_MESSAGE) from exc
    # JSON has no encoding for non-finite floats.
    if math.isnan(value) or math.isinf(value):
        raise InvestmentValidationError(INVALID_NUMBERS_MESSAGE)
    return value


def parse_investment_form(
    project_name: str | None,
    cost_text: str | None,
    revenue_text: str | None,
) -> InvestmentFields:
    name = (project_name or "").strip()
    if not name:
        raise InvestmentValidationError(MISSING_PROJECT_NAME_MESSAGE)

    cost = parse_amount(cost_text)
    revenue = parse_amount(revenue_text)
    return InvestmentFields(project_name=name, cost=cost, revenue=revenue)


def validate_credentials(
    email: str | None,
    password: str | None,
    *,
    min_password_length: int | None = None,
) -> tuple[str, str]:
    """Return the trimmed email and the password, or raise with a user-facing message."""

    normalized_email = (email or "").strip()
    if not normalized_email:
        raise CredentialValidationError("Email is required")
    if password is None or password == "":
        raise CredentialValidationError("Password is required")
    if min_password_length is not None and len(password) < min_password_length:
        raise CredentialValidationError(
            f"Password must be at least {min_password_length} characters"
        )
    return normalized_email, password
