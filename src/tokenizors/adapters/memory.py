"""In-process stand-ins for the library adapters.

They implement the same protocols without touching tiktoken data files, the
Hugging Face hub or the esbuild executable, and can be told to fail with a
given adapter error.
"""

import re
from dataclasses import dataclass, field

from tokenizors.core.errors import AdapterError, AdapterInputError
from tokenizors.core.ports.minifier import CssOutput

_WORD = re.compile(r"\w+|[^\w\s]")


@dataclass
class InMemoryEncoder:
    known: tuple[str, ...] = ("cl100k_base", "o200k_base", "p50k_base", "r50k_base")
    failure: AdapterError | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def count(self, text: str, encoding: str) -> int:
        self.calls.append((text, encoding))
        if self.failure is not None:
            raise self.failure
        if encoding not in self.known:
            raise AdapterInputError(f"Unknown encoding '{encoding}'.")
        return len(_WORD.findall(text))

    def encodings(self) -> list[str]:
        return sorted(self.known)


@dataclass
class InMemoryPretrainedTokenizer:
    failure: AdapterError | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def count(self, text: str, model_name: str) -> int:
        self.calls.append((text, model_name))
        if self.failure is not None:
            raise self.failure
        # one BOS token plus one id per word or symbol
        return 1 + len(_WORD.findall(text))


@dataclass
class InMemoryTranspiler:
    failure: AdapterError | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def minify_javascript(self, code: str) -> str:
        self.calls.append(("javascript", code))
        if self.failure is not None:
            raise self.failure
        return re.sub(r"\s+", " ", code).strip()

    async def transpile_tsx(self, code: str) -> str:
        self.calls.append(("tsx", code))
        if self.failure is not None:
            raise self.failure
        return re.sub(r"\s+", " ", code).strip()


@dataclass
class InMemoryCssMinifier:
    failure: AdapterError | None = None
    warnings: list[str] = field(default_factory=list)

    def minify(self, code: str) -> CssOutput:
        if self.failure is not None:
            raise self.failure
        return CssOutput(code=re.sub(r"\s+", "", code), warnings=list(self.warnings))
