"""TTL response cache for idempotent GET routes.

The cache belongs to the application (``app.state.response_cache``) and is
applied route by route with the ``cached`` decorator. Keys are derived from
method, path and the sorted query string, so different query parameters never
share an entry.
"""

from __future__ import annotations

import functools
import logging
import threading
import time
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str, tuple[tuple[str, str], ...]]


def cache_key(request: Request) -> CacheKey:
    query = tuple(sorted(request.query_params.multi_items()))
    return request.method.upper(), request.url.path, query


class ResponseCache:
    def __init__(self, ttl_seconds: float = 60.0, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[CacheKey, tuple[float, Any]] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: CacheKey) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, body = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return body

    def set(self, key: CacheKey, body: Any) -> None:
        with self._lock:
            self._entries[key] = (self._clock() + self._ttl, body)

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
            for key in expired:
                del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def cached(endpoint: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
    """Serve a GET endpoint from the application's ``ResponseCache``.

    The endpoint must take a ``request: Request`` parameter. Only successful
    results are stored; responses the endpoint builds itself pass through.
    """

    @functools.wraps(endpoint)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        request = kwargs.get("request")
        if not isinstance(request, Request) or request.method.upper() != "GET":
            return await endpoint(*args, **kwargs)

        cache: ResponseCache = request.app.state.response_cache
        key = cache_key(request)
        body = cache.get(key)
        if body is not None:
            logger.debug("Cache hit for %s", key)
            return JSONResponse(content=body, headers={"X-Cache": "HIT"})

        result = await endpoint(*args, **kwargs)
        if isinstance(result, Response):
            return result
        body = jsonable_encoder(result, by_alias=True)
        cache.set(key, body)
        return JSONResponse(content=body, headers={"X-Cache": "MISS"})

    return wrapper
