from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class CssOutput:
    code: str
    warnings: list[str] = field(default_factory=list)


class TranspilerPort(Protocol):
    async def minify_javascript(self, code: str) -> str: ...

    async def transpile_tsx(self, code: str) -> str: ...


class CssMinifierPort(Protocol):
    def minify(self, code: str) -> CssOutput: ...
