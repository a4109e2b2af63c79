"""Tests for the Hugging Face tokenizer adapter with a fake tokenizer class."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from tokenizors.adapters import HuggingFaceTokenizer
from tokenizors.core.errors import AdapterSystemError
from tokenizors.core.once import OnceCell


class FakeTokenizer:
    loaded: list[str] = []

    def __init__(self, model_name: str) -> None:
        self.model_name = model_name

    @classmethod
    def from_pretrained(cls, model_name: str) -> FakeTokenizer:
        if model_name == "missing/model":
            raise RuntimeError("404 Client Error: Repository Not Found")
        cls.loaded.append(model_name)
        return cls(model_name)

    def encode(self, text: str) -> Any:
        # [CLS] + words + [SEP]
        return SimpleNamespace(ids=[101, *range(len(text.split())), 102])


@pytest.fixture(autouse=True)
def _reset_loaded() -> None:
    FakeTokenizer.loaded = []


@pytest.mark.asyncio
async def test_counts_input_ids() -> None:
    tokenizer = HuggingFaceTokenizer(loader=OnceCell(lambda: FakeTokenizer))
    assert await tokenizer.count("hello big world", "bert-base-uncased") == 5
    assert FakeTokenizer.loaded == ["bert-base-uncased"]


@pytest.mark.asyncio
async def test_library_is_loaded_lazily_once() -> None:
    loads: list[int] = []

    def load() -> type[FakeTokenizer]:
        loads.append(1)
        return FakeTokenizer

    tokenizer = HuggingFaceTokenizer(loader=OnceCell(load))
    assert not tokenizer.loader.initialized
    await tokenizer.count("a", "m1")
    await tokenizer.count("b", "m2")
    assert tokenizer.loader.initialized
    assert loads == [1]


@pytest.mark.asyncio
async def test_missing_library_is_system_error() -> None:
    def load() -> Any:
        raise ImportError("No module named 'tokenizers'")

    tokenizer = HuggingFaceTokenizer(loader=OnceCell(load))
    with pytest.raises(AdapterSystemError) as exc_info:
        await tokenizer.count("hi", "bert-base-uncased")
    assert "tokenizers" in (exc_info.value.details or "")


@pytest.mark.asyncio
async def test_unknown_model_is_system_error() -> None:
    tokenizer = HuggingFaceTokenizer(loader=OnceCell(lambda: FakeTokenizer))
    with pytest.raises(AdapterSystemError) as exc_info:
        await tokenizer.count("hi", "missing/model")
    assert exc_info.value.message == "Could not load tokenizer 'missing/model'."


def test_default_loader_is_not_initialised() -> None:
    assert not HuggingFaceTokenizer().loader.initialized
