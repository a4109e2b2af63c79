"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tokenizors.adapters import (
    InMemoryCssMinifier,
    InMemoryEncoder,
    InMemoryPretrainedTokenizer,
    InMemoryTranspiler,
)
from tokenizors.api.app import create_app
from tokenizors.api.dependencies import (
    get_css_minifier,
    get_encoder,
    get_pretrained_tokenizer,
    get_transpiler,
)
from tokenizors.api.middleware import CSRF_HEADER_NAME
from tokenizors.config import Settings

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any ``.env`` file."""
    return Settings(_env_file=None, session_secret="test-secret")


@pytest.fixture
def encoder() -> InMemoryEncoder:
    return InMemoryEncoder()


@pytest.fixture
def pretrained_tokenizer() -> InMemoryPretrainedTokenizer:
    return InMemoryPretrainedTokenizer()


@pytest.fixture
def transpiler() -> InMemoryTranspiler:
    return InMemoryTranspiler()


@pytest.fixture
def css_minifier() -> InMemoryCssMinifier:
    return InMemoryCssMinifier()


@pytest.fixture
def app(
    settings: Settings,
    encoder: InMemoryEncoder,
    pretrained_tokenizer: InMemoryPretrainedTokenizer,
    transpiler: InMemoryTranspiler,
    css_minifier: InMemoryCssMinifier,
) -> FastAPI:
    """Application wired to the in-memory adapters."""
    application = create_app(settings)
    application.dependency_overrides[get_encoder] = lambda: encoder
    application.dependency_overrides[get_pretrained_tokenizer] = lambda: pretrained_tokenizer
    application.dependency_overrides[get_transpiler] = lambda: transpiler
    application.dependency_overrides[get_css_minifier] = lambda: css_minifier
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def csrf_headers(client: TestClient) -> dict[str, str]:
    """Fetch a token for the client's session and return it as request headers."""
    resp = client.get("/api/csrf-token")
    assert resp.status_code == 200, resp.text
    return {CSRF_HEADER_NAME: resp.json()["csrfToken"]}
