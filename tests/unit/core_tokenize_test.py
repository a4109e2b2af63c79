"""Tests for the token counting operations."""

import pytest

from tokenizors.adapters import InMemoryEncoder, InMemoryPretrainedTokenizer
from tokenizors.core.errors import AdapterInputError, AdapterSystemError
from tokenizors.core.results import Err, Ok, TokenizationResult
from tokenizors.core.tokenize import DEFAULT_ENCODING, count_encoder_tokens, count_pretrained_tokens


class ExplodingTokenizer:
    async def count(self, text: str, encoding: str) -> int:
        raise RuntimeError("boom")

    def encodings(self) -> list[str]:
        return []


@pytest.mark.asyncio
async def test_encoder_defaults_to_cl100k_base() -> None:
    encoder = InMemoryEncoder()
    result = await count_encoder_tokens(encoder, "hello world")
    assert result == Ok(TokenizationResult(token_count=2))
    assert encoder.calls == [("hello world", DEFAULT_ENCODING)]


@pytest.mark.asyncio
async def test_encoder_uses_requested_encoding() -> None:
    encoder = InMemoryEncoder()
    await count_encoder_tokens(encoder, "hi", "o200k_base")
    assert encoder.calls == [("hi", "o200k_base")]


@pytest.mark.asyncio
async def test_unknown_encoding_is_an_input_error() -> None:
    result = await count_encoder_tokens(InMemoryEncoder(), "hi", "nope")
    assert isinstance(result, Err)
    assert isinstance(result.error, AdapterInputError)


@pytest.mark.asyncio
async def test_adapter_error_is_returned_unchanged() -> None:
    failure = AdapterSystemError("data files unavailable", "network down")
    result = await count_encoder_tokens(InMemoryEncoder(failure=failure), "hi")
    assert result == Err(failure)


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_system_error() -> None:
    result = await count_encoder_tokens(ExplodingTokenizer(), "hi")
    assert isinstance(result, Err)
    assert isinstance(result.error, AdapterSystemError)
    assert result.error.details == "boom"


@pytest.mark.asyncio
async def test_pretrained_counts_input_ids() -> None:
    tokenizer = InMemoryPretrainedTokenizer()
    result = await count_pretrained_tokens(tokenizer, "hello world", "bert-base-uncased")
    assert result == Ok(TokenizationResult(token_count=3))
    assert tokenizer.calls == [("hello world", "bert-base-uncased")]


@pytest.mark.asyncio
async def test_pretrained_failure_is_returned() -> None:
    failure = AdapterSystemError("Could not load tokenizer 'x'.")
    result = await count_pretrained_tokens(InMemoryPretrainedTokenizer(failure=failure), "hi", "x")
    assert result == Err(failure)


@pytest.mark.asyncio
async def test_pretrained_unexpected_exception_becomes_system_error() -> None:
    result = await count_pretrained_tokens(ExplodingTokenizer(), "hi", "x")
    assert isinstance(result, Err)
    assert isinstance(result.error, AdapterSystemError)
