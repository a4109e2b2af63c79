from typing import Any

from fastapi import APIRouter

from tokenizors.api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root banner with links to the API."""
    return {
        "message": "LLM Calculator Backend API is running!",
        "links": {
            "csrf-token": "/api/csrf-token",
            "encodings": "/api/tokenize/encodings",
            "tokenize-openai": "/api/tokenize/openai",
            "tokenize-hf": "/api/tokenize/hf",
            "minify": "/api/minify",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
