from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from tokenizors.api.dependencies import get_css_minifier, get_transpiler
from tokenizors.api.errors import require, unwrap
from tokenizors.api.schemas import MinifiedCodeResponse, MinifyRequest
from tokenizors.core.minify import (
    minify_css,
    minify_typescript,
    rewrite_javascript,
    strip_spaces,
    strip_spaces_and_comments,
)
from tokenizors.core.ports.minifier import CssMinifierPort, TranspilerPort

router = APIRouter(prefix="/minify", tags=["minify"])

_OPERATION = "minification"


@router.post("/remove-spaces", response_model=MinifiedCodeResponse)
async def remove_spaces(body: MinifyRequest | None = None) -> MinifiedCodeResponse:
    """Remove every whitespace character."""
    code = require(body.code if body else None, "Code", _OPERATION)
    minified = unwrap(await run_in_threadpool(strip_spaces, code), "Failed to minify code")
    return MinifiedCodeResponse(minified_code=minified.minified_code)


@router.post("/remove-spaces-and-comments", response_model=MinifiedCodeResponse)
async def remove_spaces_and_comments(body: MinifyRequest | None = None) -> MinifiedCodeResponse:
    """Remove comments and collapse whitespace, keeping separators where tokens would merge."""
    code = require(body.code if body else None, "Code", _OPERATION)
    minified = unwrap(await run_in_threadpool(strip_spaces_and_comments, code), "Failed to minify code")
    return MinifiedCodeResponse(minified_code=minified.minified_code)


@router.post("/rewrite-javascript", response_model=MinifiedCodeResponse)
async def rewrite_js(
    body: MinifyRequest | None = None,
    transpiler: TranspilerPort = Depends(get_transpiler),
) -> MinifiedCodeResponse:
    """Minify JavaScript; inputs that look like TypeScript/TSX are transpiled first."""
    code = require(body.code if body else None, "Code", _OPERATION)
    minified = unwrap(await rewrite_javascript(transpiler, code), "Failed to minify JavaScript")
    return MinifiedCodeResponse(minified_code=minified.minified_code)


@router.post("/typescript", response_model=MinifiedCodeResponse)
async def typescript(
    body: MinifyRequest | None = None,
    transpiler: TranspilerPort = Depends(get_transpiler),
) -> MinifiedCodeResponse:
    """Transpile TSX to JavaScript and minify it."""
    code = require(body.code if body else None, "Code", _OPERATION)
    minified = unwrap(await minify_typescript(transpiler, code), "Failed to transpile TypeScript")
    return MinifiedCodeResponse(minified_code=minified.minified_code)


@router.post("/css", response_model=MinifiedCodeResponse)
async def css(
    body: MinifyRequest | None = None,
    minifier: CssMinifierPort = Depends(get_css_minifier),
) -> MinifiedCodeResponse:
    code = require(body.code if body else None, "Code", _OPERATION)
    minified = unwrap(await run_in_threadpool(minify_css, minifier, code), "Failed to minify CSS")
    return MinifiedCodeResponse(minified_code=minified.minified_code)
