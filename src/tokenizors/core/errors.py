"""Error taxonomy shared by the adapters, the core operations and the HTTP layer."""

from __future__ import annotations


class TokenizorsError(Exception):
    """Root of every error raised by this package."""


class MissingFieldError(TokenizorsError):
    """A required request field is absent or empty."""

    def __init__(self, field: str, operation: str) -> None:
        self.field = field
        self.operation = operation
        super().__init__(f"{field} is required for {operation}.")


class AdapterError(TokenizorsError):
    """Failure reported by (or around) a third-party library."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class AdapterInputError(AdapterError):
    """The library rejected the submitted content (syntax, transpile, unknown encoding)."""


class AdapterSystemError(AdapterError):
    """The library failed for reasons unrelated to the input (missing binary, network, bug)."""


class CsrfError(TokenizorsError):
    """CSRF token missing or not matching the session token."""
