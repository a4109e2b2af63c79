from typing import Protocol


class EncoderPort(Protocol):
    async def count(self, text: str, encoding: str) -> int: ...

    def encodings(self) -> list[str]: ...


class PretrainedTokenizerPort(Protocol):
    async def count(self, text: str, model_name: str) -> int: ...
