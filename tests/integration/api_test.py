"""End-to-end requests against the application with its real adapters."""

import pytest
from fastapi.testclient import TestClient

from tokenizors.adapters import EsbuildTranspiler, TiktokenEncoder
from tokenizors.api.app import create_app
from tokenizors.config import Settings
from tests.conftest import csrf_headers


@pytest.fixture
def real_client() -> TestClient:
    return TestClient(create_app(Settings(_env_file=None, session_secret="integration")))


def test_css_minification(real_client: TestClient) -> None:
    resp = real_client.post(
        "/api/minify/css",
        json={"code": ".a { color: red; }\n.b { margin: 0; }"},
        headers=csrf_headers(real_client),
    )
    assert resp.status_code == 200
    assert resp.json() == {"minifiedCode": ".a{color:red}.b{margin:0}"}


def test_invalid_css(real_client: TestClient) -> None:
    resp = real_client.post("/api/minify/css", json={"code": "a { } }"}, headers=csrf_headers(real_client))
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Failed to minify CSS"
    assert body["details"].startswith("Invalid CSS.")


def test_openai_token_count(real_client: TestClient, tiktoken_encoder: TiktokenEncoder) -> None:
    resp = real_client.post("/api/tokenize/openai", json={"text": "hello world"}, headers=csrf_headers(real_client))
    assert resp.status_code == 200
    assert resp.json() == {"tokenCount": 2}


def test_typescript_minification(real_client: TestClient, esbuild: EsbuildTranspiler) -> None:
    resp = real_client.post(
        "/api/minify/typescript",
        json={"code": "type Id = string;\nexport const id: Id = 'a';"},
        headers=csrf_headers(real_client),
    )
    assert resp.status_code == 200
    assert "type Id" not in resp.json()["minifiedCode"]


def test_lifespan_runs(real_client: TestClient) -> None:
    with real_client as client:
        assert client.get("/health").json() == {"status": "ok"}
