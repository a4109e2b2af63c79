"""Typed calls for each API endpoint, built on ``ApiClient``."""

from __future__ import annotations

from typing import Any

from tokenizors.client.gateway import ApiClient, UnexpectedClientError
from tokenizors.core.results import MinificationResult, TokenizationResult


def _token_count(data: Any) -> TokenizationResult:
    try:
        return TokenizationResult(token_count=int(data["tokenCount"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise UnexpectedClientError("Malformed tokenization response") from exc


def _minified(data: Any) -> MinificationResult:
    try:
        return MinificationResult(minified_code=str(data["minifiedCode"]))
    except (KeyError, TypeError) as exc:
        raise UnexpectedClientError("Malformed minification response") from exc


async def count_openai_tokens(client: ApiClient, text: str, model: str = "cl100k_base") -> TokenizationResult:
    return _token_count(await client.post("/api/tokenize/openai", {"text": text, "model": model}))


async def count_hf_tokens(client: ApiClient, text: str, model_name: str) -> TokenizationResult:
    return _token_count(await client.post("/api/tokenize/hf", {"text": text, "modelName": model_name}))


async def list_encodings(client: ApiClient) -> list[str]:
    data = await client.get("/api/tokenize/encodings")
    try:
        return [str(name) for name in data["encodings"]]
    except (KeyError, TypeError) as exc:
        raise UnexpectedClientError("Malformed encodings response") from exc


async def minify_remove_spaces(client: ApiClient, code: str) -> MinificationResult:
    return _minified(await client.post("/api/minify/remove-spaces", {"code": code}))


async def minify_remove_spaces_and_comments(client: ApiClient, code: str) -> MinificationResult:
    return _minified(await client.post("/api/minify/remove-spaces-and-comments", {"code": code}))


async def minify_rewrite_javascript(client: ApiClient, code: str) -> MinificationResult:
    """JavaScript minification; the server detects TypeScript/TSX itself."""
    return _minified(await client.post("/api/minify/rewrite-javascript", {"code": code}))


async def minify_typescript(client: ApiClient, code: str) -> MinificationResult:
    return _minified(await client.post("/api/minify/typescript", {"code": code}))


async def minify_css(client: ApiClient, code: str) -> MinificationResult:
    return _minified(await client.post("/api/minify/css", {"code": code}))
