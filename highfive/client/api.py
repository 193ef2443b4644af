"""
API Client
Typed JSON fetch wrapper over the site API
"""

import logging
from typing import Any, Callable, Optional
import httpx
from highfive.config import settings
from highfive.client.errors import AuthFailure, HighFiveError, NetworkFailure

logger = logging.getLogger(__name__)


def _body_message(body: Any, text: str) -> str:
    if isinstance(body, dict):
        for field in ("detail", "message", "error"):
            value = body.get(field)
            if isinstance(value, str) and value:
                return value
            if isinstance(value, list) and value:
                # FastAPI validation errors: [{"loc": [...], "msg": "..."}]
                first = value[0]
                if isinstance(first, dict) and first.get("msg"):
                    return str(first["msg"])
    return text


def describe_failure(exc: BaseException) -> str:
    """User-facing text for a failed request"""
    if isinstance(exc, NetworkFailure):
        text = exc.message or ""
        return _body_message(exc.body, text) or f"Request failed ({exc.status_code})"
    if isinstance(exc, HighFiveError):
        return exc.message
    return str(exc) or type(exc).__name__


class ApiClient:
    """
    JSON requests against the site API

    Sends the bearer token when a session exists. Non-2xx responses raise
    NetworkFailure carrying the raw response body as the message; a 401
    raises AuthFailure and calls ``on_unauthorized``. No retries and no
    caching happen here.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        on_unauthorized: Optional[Callable[[], None]] = None
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.token = token
        self.on_unauthorized = on_unauthorized
        self._client = httpx.AsyncClient(base_url=self.base_url, transport=transport)

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def request(self, path: str, method: str = "GET", json: Any = None) -> Any:
        """
        Send one request and decode the JSON reply

        Returns:
            Decoded JSON, or None for 204/empty bodies

        Raises:
            AuthFailure: on 401
            NetworkFailure: on any other non-2xx status or a transport error
        """
        headers = self._headers()
        if json is not None:
            headers["Content-Type"] = "application/json"

        try:
            response = await self._client.request(method, path, headers=headers, json=json)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise NetworkFailure(f"Could not reach the server: {e}") from e

        return self._handle(method, path, response)

    async def upload(self, path: str, files: list) -> Any:
        """
        Multipart upload

        Args:
            files: httpx-style list of (field, (filename, content, content_type))
        """
        try:
            response = await self._client.post(path, headers=self._headers(), files=files)
        except httpx.HTTPError as e:
            logger.warning("POST %s failed: %s", path, e)
            raise NetworkFailure(f"Could not reach the server: {e}") from e

        return self._handle("POST", path, response)

    def _handle(self, method: str, path: str, response: httpx.Response) -> Any:
        if response.is_success:
            if response.status_code == 204 or not response.content:
                return None
            try:
                return response.json()
            except ValueError:
                logger.warning("%s %s returned a non-JSON body", method, path)
                raise NetworkFailure(
                    "Invalid JSON response", status_code=response.status_code, body=response.text
                )

        text = response.text
        try:
            body = response.json()
        except ValueError:
            body = None

        logger.warning("%s %s returned %s", method, path, response.status_code)

        if response.status_code == 401:
            had_session = self.token is not None
            self.token = None
            if had_session and self.on_unauthorized:
                self.on_unauthorized()
            raise AuthFailure(text, status_code=401, body=body)

        raise NetworkFailure(text, status_code=response.status_code, body=body)

    async def get(self, path: str) -> Any:
        return await self.request(path)

    async def post(self, path: str, payload: Any = None) -> Any:
        return await self.request(path, "POST", payload)

    async def put(self, path: str, payload: Any) -> Any:
        return await self.request(path, "PUT", payload)

    async def delete(self, path: str) -> Any:
        return await self.request(path, "DELETE")

    async def aclose(self) -> None:
        await self._client.aclose()
