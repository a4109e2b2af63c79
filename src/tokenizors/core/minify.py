"""Minification operations.

Each operation is independent and returns a tagged result; adapter errors
never escape. Strip operations are pure and cannot fail.
"""

import logging
from collections.abc import Awaitable, Callable

from tokenizors.core.errors import AdapterError, AdapterInputError, AdapterSystemError
from tokenizors.core.ports.minifier import CssMinifierPort, TranspilerPort
from tokenizors.core.results import Err, MinificationResult, Ok, Result
from tokenizors.core.sniff import SourceKind, detect_source_kind
from tokenizors.core.strip import remove_whitespace, remove_whitespace_and_comments

logger = logging.getLogger(__name__)


def strip_spaces(code: str) -> Result[MinificationResult]:
    return Ok(MinificationResult(minified_code=remove_whitespace(code)))


def strip_spaces_and_comments(code: str) -> Result[MinificationResult]:
    return Ok(MinificationResult(minified_code=remove_whitespace_and_comments(code)))


async def rewrite_javascript(transpiler: TranspilerPort, code: str) -> Result[MinificationResult]:
    """Minify JavaScript, or transpile and minify when the input looks like TypeScript/TSX."""
    kind = detect_source_kind(code)
    logger.debug("Source sniffed as %s", kind.value)
    if kind is SourceKind.TYPESCRIPT:
        return await _run(transpiler.transpile_tsx, code, "TypeScript transpilation")
    return await _run(transpiler.minify_javascript, code, "JavaScript minification")


async def minify_typescript(transpiler: TranspilerPort, code: str) -> Result[MinificationResult]:
    """Transpile and minify ``code`` as TSX without sniffing."""
    return await _run(transpiler.transpile_tsx, code, "TypeScript transpilation")


def minify_css(minifier: CssMinifierPort, code: str) -> Result[MinificationResult]:
    try:
        output = minifier.minify(code)
    except AdapterInputError as exc:
        logger.info("CSS minification rejected input: %s", exc.details or exc.message)
        return Err(exc)
    except AdapterError as exc:
        logger.error("CSS minification failed: %s", exc.details or exc.message)
        return Err(exc)
    except Exception as exc:
        logger.exception("Unexpected CSS minifier failure")
        return Err(AdapterSystemError("Unexpected CSS minifier failure.", str(exc)))
    for warning in output.warnings:
        logger.warning("CSS minifier warning: %s", warning)
    return Ok(MinificationResult(minified_code=output.code))


async def _run(
    operation: Callable[[str], Awaitable[str]],
    code: str,
    label: str,
) -> Result[MinificationResult]:
    try:
        minified = await operation(code)
    except AdapterInputError as exc:
        logger.info("%s rejected input: %s", label, exc.details or exc.message)
        return Err(exc)
    except AdapterError as exc:
        logger.error("%s failed: %s", label, exc.details or exc.message)
        return Err(exc)
    except Exception as exc:
        logger.exception("Unexpected failure during %s", label)
        return Err(AdapterSystemError(f"Unexpected failure during {label}.", str(exc)))
    return Ok(MinificationResult(minified_code=minified))
