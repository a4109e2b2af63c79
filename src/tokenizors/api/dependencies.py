"""Request-scoped access to the adapters owned by the application.

``create_app`` builds one instance of each adapter and stores it on
``app.state``; tests replace them through ``app.dependency_overrides``.
"""

from fastapi import Request

from tokenizors.config import Settings
from tokenizors.core.ports.minifier import CssMinifierPort, TranspilerPort
from tokenizors.core.ports.tokenizer import EncoderPort, PretrainedTokenizerPort


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_encoder(request: Request) -> EncoderPort:
    return request.app.state.encoder


def get_pretrained_tokenizer(request: Request) -> PretrainedTokenizerPort:
    return request.app.state.pretrained_tokenizer


def get_transpiler(request: Request) -> TranspilerPort:
    return request.app.state.transpiler


def get_css_minifier(request: Request) -> CssMinifierPort:
    return request.app.state.css_minifier
