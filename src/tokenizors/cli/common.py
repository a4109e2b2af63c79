"""Helpers shared by the tokenize and minify commands."""

import sys
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Annotated, TypeVar

import typer
from rich.console import Console

from tokenizors.client.gateway import ApiClient, GatewayError, NoResponseError, ServerError
from tokenizors.core.results import Err, Result

T = TypeVar("T")

console = Console()
err_console = Console(stderr=True)

ServerOption = Annotated[
    str | None,
    typer.Option("--server", help="Send the request to a running API (e.g. http://localhost:8000) instead."),
]


def fail(message: str, details: str | None = None) -> typer.Exit:
    err_console.print(f"[red]{message}[/red]")
    if details:
        err_console.print(details, markup=False, highlight=False)
    return typer.Exit(code=1)


def read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise fail(f"File not found: {source}")
    return path.read_text(encoding="utf-8")


def unwrap_local(result: Result[T], failure: str) -> T:
    if isinstance(result, Err):
        raise fail(f"{failure}: {result.error.message}", result.error.details)
    return result.value


async def call_server(server: str, call: Callable[[ApiClient], Awaitable[T]]) -> T:
    async with ApiClient(server) as client:
        try:
            return await call(client)
        except ServerError as exc:
            raise fail(f"Server error {exc.status_code}: {exc.error}", exc.details) from exc
        except NoResponseError as exc:
            raise fail(f"{exc} at {server}") from exc
        except GatewayError as exc:
            raise fail(f"Unexpected client error: {exc}") from exc
