import asyncio
from collections.abc import Awaitable, Callable
from typing import Annotated

import typer

from tokenizors.adapters import CssMinifier, EsbuildTranspiler
from tokenizors.cli.common import ServerOption, call_server, fail, read_source, unwrap_local
from tokenizors.client import services
from tokenizors.client.gateway import ApiClient
from tokenizors.config import get_settings
from tokenizors.core import minify as core
from tokenizors.core.results import MinificationResult, Result

minify_app = typer.Typer(help="Minify source code.")

SourceArgument = Annotated[str, typer.Argument(help="Path to the source file, or '-' for stdin.")]


def _transpiler() -> EsbuildTranspiler:
    settings = get_settings()
    return EsbuildTranspiler(settings.esbuild_path, settings.es_target)


def _emit(
    source: str,
    server: str | None,
    local: Callable[[str], Awaitable[Result[MinificationResult]]],
    remote: Callable[[ApiClient, str], Awaitable[MinificationResult]],
    failure: str,
) -> None:
    code = read_source(source)
    if not code:
        raise fail("Code is required for minification.")

    async def _run() -> str:
        if server:
            return (await call_server(server, lambda c: remote(c, code))).minified_code
        return unwrap_local(await local(code), failure).minified_code

    typer.echo(asyncio.run(_run()))


async def _as_async(result: Result[MinificationResult]) -> Result[MinificationResult]:
    return result


@minify_app.command("remove-spaces")
def remove_spaces(source: SourceArgument, server: ServerOption = None) -> None:
    """Remove every whitespace character."""
    _emit(
        source,
        server,
        lambda code: _as_async(core.strip_spaces(code)),
        services.minify_remove_spaces,
        "Failed to minify code",
    )


@minify_app.command("remove-spaces-and-comments")
def remove_spaces_and_comments(source: SourceArgument, server: ServerOption = None) -> None:
    """Remove comments and collapse whitespace."""
    _emit(
        source,
        server,
        lambda code: _as_async(core.strip_spaces_and_comments(code)),
        services.minify_remove_spaces_and_comments,
        "Failed to minify code",
    )


@minify_app.command("javascript")
def javascript(source: SourceArgument, server: ServerOption = None) -> None:
    """Minify JavaScript (TypeScript/TSX input is detected and transpiled)."""
    _emit(
        source,
        server,
        lambda code: core.rewrite_javascript(_transpiler(), code),
        services.minify_rewrite_javascript,
        "Failed to minify JavaScript",
    )


@minify_app.command("typescript")
def typescript(source: SourceArgument, server: ServerOption = None) -> None:
    """Transpile TSX and minify the result."""
    _emit(
        source,
        server,
        lambda code: core.minify_typescript(_transpiler(), code),
        services.minify_typescript,
        "Failed to transpile TypeScript",
    )


@minify_app.command("css")
def css(source: SourceArgument, server: ServerOption = None) -> None:
    """Minify CSS."""
    _emit(
        source,
        server,
        lambda code: _as_async(core.minify_css(CssMinifier(), code)),
        services.minify_css,
        "Failed to minify CSS",
    )
