"""
HighFive Client
Headless rendition of the site's browser data flow
"""

from highfive.client.api import ApiClient, describe_failure
from highfive.client.app import ClientApp
from highfive.client.auth import AuthContext, AuthGuard, GuardAction, GuardDecision, LoginResult, Navigator
from highfive.client.errors import (
    AuthFailure,
    ExternalServiceFailure,
    HighFiveError,
    NetworkFailure,
    ValidationFailure,
)
from highfive.client.mutations import MutationExecutor, MutationResult
from highfive.client.query_cache import QueryCache, QueryResult, QueryStatus

__all__ = [
    "ApiClient",
    "describe_failure",
    "ClientApp",
    "AuthContext",
    "AuthGuard",
    "GuardAction",
    "GuardDecision",
    "LoginResult",
    "Navigator",
    "AuthFailure",
    "ExternalServiceFailure",
    "HighFiveError",
    "NetworkFailure",
    "ValidationFailure",
    "MutationExecutor",
    "MutationResult",
    "QueryCache",
    "QueryResult",
    "QueryStatus",
]
