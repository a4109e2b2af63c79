"""HTTP client for the Tokenizors API.

Failures surface as one of three ``GatewayError`` subclasses so callers can
tell them apart:

- ``ServerError``: the server answered with a non-2xx status;
- ``NoResponseError``: no response arrived (connection refused, timeout);
- ``UnexpectedClientError``: anything else that went wrong on this side.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
CSRF_ENDPOINT = "/api/csrf-token"
CSRF_HEADER_NAME = "X-CSRF-Token"

_SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


class GatewayError(Exception):
    """Base class for every failure reported by ``ApiClient``."""


class ServerError(GatewayError):
    def __init__(self, status_code: int, error: str, details: str | None = None) -> None:
        super().__init__(error if not details else f"{error} ({details})")
        self.status_code = status_code
        self.error = error
        self.details = details


class NoResponseError(GatewayError):
    def __init__(self, message: str = "No response from server") -> None:
        super().__init__(message)


class UnexpectedClientError(GatewayError):
    pass


class ApiClient:
    """Async JSON client that keeps the session cookie and sends the CSRF token.

    Use as an async context manager, or call ``aclose`` when done.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 120.0,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
        )
        self._csrf_token: str | None = None

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def csrf_token(self, refresh: bool = False) -> str:
        if self._csrf_token is None or refresh:
            data = await self._send("GET", CSRF_ENDPOINT)
            try:
                self._csrf_token = str(data["csrfToken"])
            except (KeyError, TypeError) as exc:
                raise UnexpectedClientError("CSRF token missing from server response") from exc
        return self._csrf_token

    async def get(self, endpoint: str) -> Any:
        return await self.request("GET", endpoint)

    async def post(self, endpoint: str, body: Any) -> Any:
        return await self.request("POST", endpoint, body)

    async def request(self, method: str, endpoint: str, body: Any = None) -> Any:
        method = method.upper()
        if method in _SAFE_METHODS:
            return await self._send(method, endpoint, body)

        headers = {CSRF_HEADER_NAME: await self.csrf_token()}
        try:
            return await self._send(method, endpoint, body, headers)
        except ServerError as exc:
            if exc.status_code != 403:
                raise
        # the session (and its token) may have expired; retry once with a fresh token
        headers[CSRF_HEADER_NAME] = await self.csrf_token(refresh=True)
        return await self._send(method, endpoint, body, headers)

    async def _send(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        try:
            response = await self._http.request(
                method,
                endpoint,
                json=body,
                headers=headers,
            )
        except httpx.TransportError as exc:
            logger.error("No response for %s %s: %s", method, endpoint, exc)
            raise NoResponseError() from exc
        except Exception as exc:
            raise UnexpectedClientError(f"Request {method} {endpoint} failed: {exc}") from exc

        if response.is_error:
            raise _server_error(response)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise UnexpectedClientError(f"Response of {method} {endpoint} is not valid JSON") from exc


def _server_error(response: httpx.Response) -> ServerError:
    try:
        data = response.json()
    except ValueError:
        return ServerError(
            response.status_code,
            f"HTTP error! Status: {response.status_code}, Message: {response.reason_phrase}",
        )
    if isinstance(data, dict) and data.get("error"):
        details = data.get("details")
        return ServerError(response.status_code, str(data["error"]), str(details) if details else None)
    return ServerError(response.status_code, f"HTTP error! Status: {response.status_code}")
