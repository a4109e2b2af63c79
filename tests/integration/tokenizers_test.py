"""Token counting against the real tiktoken and Hugging Face libraries."""

import pytest

from tokenizors.adapters import HuggingFaceTokenizer, TiktokenEncoder
from tokenizors.core.errors import AdapterInputError
from tokenizors.core.results import Ok
from tokenizors.core.tokenize import count_encoder_tokens, count_pretrained_tokens


@pytest.mark.asyncio
async def test_cl100k_counts_hello_world(tiktoken_encoder: TiktokenEncoder) -> None:
    assert await tiktoken_encoder.count("hello world", "cl100k_base") == 2


@pytest.mark.asyncio
async def test_model_name_resolves_to_encoding(tiktoken_encoder: TiktokenEncoder) -> None:
    assert await tiktoken_encoder.count("hello world", "gpt-4") == 2


@pytest.mark.asyncio
async def test_special_tokens_are_counted_as_text(tiktoken_encoder: TiktokenEncoder) -> None:
    assert await tiktoken_encoder.count("<|endoftext|>", "cl100k_base") > 1


@pytest.mark.asyncio
async def test_unknown_encoding(tiktoken_encoder: TiktokenEncoder) -> None:
    with pytest.raises(AdapterInputError):
        await tiktoken_encoder.count("hi", "definitely-not-an-encoding")


def test_lists_known_encodings(tiktoken_encoder: TiktokenEncoder) -> None:
    names = tiktoken_encoder.encodings()
    assert "cl100k_base" in names
    assert names == sorted(names)


@pytest.mark.asyncio
async def test_count_operation_with_default_encoding(tiktoken_encoder: TiktokenEncoder) -> None:
    result = await count_encoder_tokens(tiktoken_encoder, "The quick brown fox")
    assert isinstance(result, Ok)
    assert result.value.token_count >= 1


@pytest.mark.asyncio
async def test_bert_counts_special_tokens(hf_model_name: str, hf_tokenizer: HuggingFaceTokenizer) -> None:
    # [CLS] hello world [SEP]
    assert await hf_tokenizer.count("hello world", hf_model_name) == 4


@pytest.mark.asyncio
async def test_pretrained_operation(hf_model_name: str, hf_tokenizer: HuggingFaceTokenizer) -> None:
    result = await count_pretrained_tokens(hf_tokenizer, "tokenizers are fast", hf_model_name)
    assert isinstance(result, Ok)
    assert result.value.token_count >= 3
    assert hf_tokenizer.loader.initialized
