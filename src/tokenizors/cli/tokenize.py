import asyncio
from typing import Annotated

import typer

from tokenizors.adapters import HuggingFaceTokenizer, TiktokenEncoder
from tokenizors.cli.common import ServerOption, call_server, console, fail, unwrap_local
from tokenizors.client import services
from tokenizors.config import get_settings
from tokenizors.core.tokenize import count_encoder_tokens, count_pretrained_tokens

tokenize_app = typer.Typer(help="Count tokens.")


@tokenize_app.command("openai")
def openai(
    text: Annotated[str, typer.Argument(help="Text to tokenize.")],
    model: Annotated[str | None, typer.Option(help="Encoding or OpenAI model name.")] = None,
    server: ServerOption = None,
) -> None:
    """Count tokens with a tiktoken encoding."""
    if not text:
        raise fail("Text is required for tokenization.")
    encoding = model or get_settings().default_encoding

    async def _run() -> int:
        if server:
            return (await call_server(server, lambda c: services.count_openai_tokens(c, text, encoding))).token_count
        result = await count_encoder_tokens(TiktokenEncoder(), text, encoding)
        return unwrap_local(result, "Failed to tokenize text for OpenAI").token_count

    count = asyncio.run(_run())
    console.print(f"{count} tokens [dim]({encoding})[/dim]")


@tokenize_app.command("hf")
def hf(
    text: Annotated[str, typer.Argument(help="Text to tokenize.")],
    model_name: Annotated[str, typer.Option("--model-name", help="Hugging Face tokenizer id.")],
    server: ServerOption = None,
) -> None:
    """Count tokens with a pretrained Hugging Face tokenizer."""
    if not text or not model_name:
        raise fail("Text and modelName are required for HF tokenization.")

    async def _run() -> int:
        if server:
            return (await call_server(server, lambda c: services.count_hf_tokens(c, text, model_name))).token_count
        result = await count_pretrained_tokens(HuggingFaceTokenizer(), text, model_name)
        return unwrap_local(result, "Failed to tokenize text for Hugging Face").token_count

    count = asyncio.run(_run())
    console.print(f"{count} tokens [dim]({model_name})[/dim]")


@tokenize_app.command("encodings")
def encodings(server: ServerOption = None) -> None:
    """List available tiktoken encodings."""
    if server:
        names = asyncio.run(call_server(server, services.list_encodings))
    else:
        names = TiktokenEncoder().encodings()
    for name in names:
        console.print(name)
