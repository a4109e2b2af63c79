"""Mapping of validation failures and adapter results onto the JSON error envelope."""

from __future__ import annotations

import logging
from typing import TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tokenizors.api.schemas import ErrorEnvelope
from tokenizors.core.errors import AdapterInputError, MissingFieldError
from tokenizors.core.results import Err, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApiError(Exception):
    """Raised by handlers to answer with an error envelope."""

    def __init__(self, status_code: int, error: str, details: str | None = None) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def envelope(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorEnvelope(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


def require(value: str | None, field: str, operation: str) -> str:
    """Return ``value`` or raise ``MissingFieldError`` when it is absent or empty."""
    if not value:
        raise MissingFieldError(field, operation)
    return value


def unwrap(result: Result[T], failure: str) -> T:
    """Return the value of a successful result or raise the matching ``ApiError``.

    Input errors become 400 with the adapter's detail; every other adapter
    error becomes 500 and keeps its detail in the server log only.
    """
    if not isinstance(result, Err):
        return result.value
    exc = result.error
    if isinstance(exc, AdapterInputError):
        details = exc.message if not exc.details else f"{exc.message}\n{exc.details}"
        raise ApiError(400, failure, details)
    logger.error("%s: %s (%s)", failure, exc.message, exc.details)
    raise ApiError(500, failure)


async def _api_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ApiError)
    return envelope(exc.status_code, exc.error, exc.details)


async def _missing_field_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return envelope(400, str(exc))


async def _request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}" for err in exc.errors()
    )
    logger.info("Invalid body for %s %s: %s", request.method, request.url.path, problems)
    return envelope(400, "Invalid request body.", problems or None)


async def _http_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, StarletteHTTPException)
    response = envelope(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(MissingFieldError, _missing_field_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
