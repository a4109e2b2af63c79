from __future__ import annotations

import asyncio
import logging

import tiktoken

from tokenizors.core.errors import AdapterInputError, AdapterSystemError

logger = logging.getLogger(__name__)


class TiktokenEncoder:
    """BPE token counting backed by tiktoken.

    Implements the ``EncoderPort`` protocol. ``encoding`` may be an encoding
    name (``cl100k_base``) or an OpenAI model name (``gpt-4o``).
    """

    async def count(self, text: str, encoding: str) -> int:
        enc = await asyncio.to_thread(self._resolve, encoding)
        tokens = await asyncio.to_thread(enc.encode, text, disallowed_special=())
        return len(tokens)

    def encodings(self) -> list[str]:
        return sorted(tiktoken.list_encoding_names())

    @staticmethod
    def _resolve(name: str) -> tiktoken.Encoding:
        if name in tiktoken.list_encoding_names():
            try:
                return tiktoken.get_encoding(name)
            except Exception as exc:
                raise AdapterSystemError(f"Could not load encoding '{name}'.", str(exc)) from exc

        try:
            return tiktoken.encoding_for_model(name)
        except KeyError as exc:
            raise AdapterInputError(
                f"Unknown encoding '{name}'.",
                f"Known encodings: {', '.join(sorted(tiktoken.list_encoding_names()))}",
            ) from exc
        except Exception as exc:
            raise AdapterSystemError(f"Could not load encoding for model '{name}'.", str(exc)) from exc
