# This package wraps the hosted Supabase project: GoTrue for auth and PostgREST for investment rows.
# Every failure surfaces as RemoteOperationError carrying the backend's own message.

from roi_validator.backend.auth_client import AuthSession, SupabaseAuthClient
from roi_validator.backend.data_client import InvestmentDataClient
from roi_validator.backend.errors import BackendUnavailableError, RemoteOperationError

__all__ = [
    "AuthSession",
    "BackendUnavailableError",
    "InvestmentDataClient",
    "RemoteOperationError",
    "SupabaseAuthClient",
]
