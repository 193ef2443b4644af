"""
Client Errors
Failure taxonomy shared by the fetch wrapper, cache, mutations and views
"""

from typing import Any, Optional, Sequence


class HighFiveError(Exception):
    """Base class for failures surfaced to a view"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": type(self).__name__, "message": self.message}


class NetworkFailure(HighFiveError):
    """Transport error or a non-2xx response; message is the response body"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["status_code"] = self.status_code
        return data


class AuthFailure(NetworkFailure):
    """Missing, rejected or expired session"""


class ValidationFailure(HighFiveError):
    """Client-side form validation failed; no request was sent"""

    def __init__(self, message: str, fields: Sequence[str] = ()):
        super().__init__(message)
        self.fields = list(fields)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["fields"] = self.fields
        return data


class ExternalServiceFailure(HighFiveError):
    """A third-party service (LLM, mail, storage) could not be used"""
