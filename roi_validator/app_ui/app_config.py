# This file defines runtime configuration for the Streamlit app.
# Values come from environment variables with local-development defaults.

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from roi_validator.common.settings import Settings


@dataclass(frozen=True)
class AppConfig:
    supabase_url: str
    supabase_anon_key: str
    app_base_url: str
    password_reset_redirect_url: str
    request_timeout_seconds: int
    password_min_length: int


def load_app_config(settings: Settings, *, load_env: bool = True) -> AppConfig:
    if load_env:
        load_dotenv()

    app_base_url = os.getenv("ROI_APP_BASE_URL", "http://localhost:8501").rstrip("/")
    reset_redirect = os.getenv("ROI_PASSWORD_RESET_REDIRECT_URL") or f"{app_base_url}/reset-password"

    return AppConfig(
        supabase_url=settings.SUPABASE_URL,
        supabase_anon_key=settings.SUPABASE_ANON_KEY,
        app_base_url=app_base_url,
        password_reset_redirect_url=reset_redirect,
        request_timeout_seconds=int(os.getenv("ROI_REQUEST_TIMEOUT_SECONDS", "8")),
        password_min_length=int(os.getenv("ROI_PASSWORD_MIN_LENGTH", "6")),
    )
