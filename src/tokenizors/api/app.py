from __future__ import annotations

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from tokenizors.adapters import CssMinifier, EsbuildTranspiler, HuggingFaceTokenizer, TiktokenEncoder
from tokenizors.api.cache import ResponseCache
from tokenizors.api.errors import register_exception_handlers
from tokenizors.api.lifespan import lifespan
from tokenizors.api.middleware import CsrfMiddleware, ErrorEnvelopeMiddleware, RequestLoggingMiddleware
from tokenizors.api.routes.csrf import router as csrf_router
from tokenizors.api.routes.health import router as health_router
from tokenizors.api.routes.minify import router as minify_router
from tokenizors.api.routes.tokenize import router as tokenize_router
from tokenizors.config import Settings, get_settings

CSRF_EXEMPT_PATHS = ("/health", "/api/csrf-token")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Tokenizors API",
        description="Token counting and code minification.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.response_cache = ResponseCache(ttl_seconds=settings.cache_ttl_seconds)
    app.state.encoder = TiktokenEncoder()
    app.state.pretrained_tokenizer = HuggingFaceTokenizer()
    app.state.transpiler = EsbuildTranspiler(settings.esbuild_path, settings.es_target)
    app.state.css_minifier = CssMinifier()

    register_exception_handlers(app)

    # Added innermost first: CORS sees the request first, the envelope fallback last.
    app.add_middleware(ErrorEnvelopeMiddleware)
    app.add_middleware(CsrfMiddleware, exempt_paths=CSRF_EXEMPT_PATHS, enabled=settings.csrf_enabled)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.resolved_session_secret(),
        session_cookie="session",
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.https_only,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-CSRF-Token"],
    )

    api = APIRouter(prefix="/api")
    api.include_router(tokenize_router)
    api.include_router(minify_router)
    api.include_router(csrf_router)

    app.include_router(health_router, include_in_schema=False)
    app.include_router(api)

    return app
