from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    transpiler = app.state.transpiler
    available = getattr(transpiler, "available", None)
    if available is not None and not available():
        logger.warning("esbuild executable not found; JavaScript and TypeScript minification will fail")
    yield
    app.state.response_cache.clear()
