from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from tokenizors.core.errors import AdapterError

T = TypeVar("T")


@dataclass(frozen=True)
class TokenizationResult:
    token_count: int


@dataclass(frozen=True)
class MinificationResult:
    minified_code: str


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: AdapterError


Result = Ok[T] | Err
