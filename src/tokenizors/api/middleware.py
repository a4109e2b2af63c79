"""ASGI middleware: request logging, CSRF validation and the catch-all error envelope."""

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from tokenizors.api.errors import envelope
from tokenizors.core.errors import CsrfError

logger = logging.getLogger(__name__)

CSRF_HEADER_NAME = "X-CSRF-Token"
CSRF_SESSION_KEY = "_csrf_token"
CSRF_TOKEN_BYTES = 32

PROTECTED_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def issue_csrf_token(request: Request) -> str:
    """Return the session's CSRF token, creating one if the session has none."""
    session = request.session
    token = session.get(CSRF_SESSION_KEY)
    if not token:
        token = secrets.token_urlsafe(CSRF_TOKEN_BYTES)
        session[CSRF_SESSION_KEY] = token
    return token


def _validate(request: Request) -> None:
    session = request.scope.get("session") or {}
    expected = session.get(CSRF_SESSION_KEY)
    if not expected:
        raise CsrfError("no token in session")
    received = request.headers.get(CSRF_HEADER_NAME)
    if not received:
        raise CsrfError(f"missing {CSRF_HEADER_NAME} header")
    if not secrets.compare_digest(expected, received):
        raise CsrfError("token mismatch")


class CsrfMiddleware(BaseHTTPMiddleware):
    """Requires the session-bound token in ``X-CSRF-Token`` on state-changing requests.

    Must run inside ``SessionMiddleware``.
    """

    def __init__(self, app: ASGIApp, exempt_paths: Iterable[str] = (), enabled: bool = True) -> None:
        super().__init__(app)
        self._exempt_paths = tuple(exempt_paths)
        self._enabled = enabled

    def _is_exempt(self, path: str) -> bool:
        return any(path == exempt or path.startswith(exempt.rstrip("/") + "/") for exempt in self._exempt_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self._enabled or request.method not in PROTECTED_METHODS or self._is_exempt(request.url.path):
            return await call_next(request)

        try:
            _validate(request)
        except CsrfError as exc:
            logger.warning("CSRF validation failed for %s %s: %s", request.method, request.url.path, exc)
            return envelope(403, "Invalid CSRF token")
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response


class ErrorEnvelopeMiddleware(BaseHTTPMiddleware):
    """Turns any exception escaping a handler into a 500 error envelope."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unexpected error while handling %s %s", request.method, request.url.path)
            return envelope(500, "Internal server error")
