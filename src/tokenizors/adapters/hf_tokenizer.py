from __future__ import annotations

import asyncio
import importlib
import logging
from typing import Any

from tokenizors.core.errors import AdapterSystemError
from tokenizors.core.once import OnceCell

logger = logging.getLogger(__name__)


def _load_tokenizer_class() -> Any:
    logger.info("Loading the Hugging Face tokenizers library")
    return importlib.import_module("tokenizers").Tokenizer


class HuggingFaceTokenizer:
    """Token counting with pretrained tokenizers from the Hugging Face hub.

    Implements the ``PretrainedTokenizerPort`` protocol. The ``tokenizers``
    library is loaded on first use through a ``OnceCell``; fetching a model's
    ``tokenizer.json`` may hit the network and take seconds, so loading and
    encoding run in worker threads.
    """

    def __init__(self, loader: OnceCell[Any] | None = None) -> None:
        self._loader = loader if loader is not None else OnceCell(_load_tokenizer_class)

    @property
    def loader(self) -> OnceCell[Any]:
        return self._loader

    async def count(self, text: str, model_name: str) -> int:
        try:
            tokenizer_cls = await asyncio.to_thread(self._loader.get)
        except ImportError as exc:
            raise AdapterSystemError("Hugging Face tokenizers are not available.", str(exc)) from exc

        try:
            tokenizer = await asyncio.to_thread(tokenizer_cls.from_pretrained, model_name)
        except Exception as exc:
            raise AdapterSystemError(f"Could not load tokenizer '{model_name}'.", str(exc)) from exc

        try:
            encoding = await asyncio.to_thread(tokenizer.encode, text)
        except Exception as exc:
            raise AdapterSystemError(f"Tokenizer '{model_name}' failed to encode text.", str(exc)) from exc
        return len(encoding.ids)
