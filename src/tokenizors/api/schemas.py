from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Requests ---
# Fields are optional so that presence is checked by the handlers and
# answered with the error envelope instead of a generic validation error.


class TokenizeOpenAIRequest(_CamelModel):
    text: str | None = None
    model: str | None = None


class TokenizeHFRequest(_CamelModel):
    text: str | None = None
    model_name: str | None = None


class MinifyRequest(_CamelModel):
    code: str | None = None


# --- Responses ---


class TokenCountResponse(_CamelModel):
    token_count: int


class MinifiedCodeResponse(_CamelModel):
    minified_code: str


class CsrfTokenResponse(_CamelModel):
    csrf_token: str


class EncodingsResponse(_CamelModel):
    encodings: list[str]
    default: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorEnvelope(BaseModel):
    error: str
    details: str | None = None
