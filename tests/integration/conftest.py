"""Session-scoped fixtures for integration tests.

Each fixture skips the requesting tests when its external resource (tiktoken
data files, the Hugging Face hub, the esbuild executable) is unavailable.
"""

import shutil

import pytest

from tokenizors.adapters import EsbuildTranspiler, HuggingFaceTokenizer, TiktokenEncoder


@pytest.fixture(scope="session")
def tiktoken_encoder() -> TiktokenEncoder:
    """Real tiktoken encoder with ``cl100k_base`` data loaded."""
    import tiktoken

    try:
        tiktoken.get_encoding("cl100k_base")
    except Exception as exc:  # noqa: BLE001
        pytest.skip(f"tiktoken data for cl100k_base unavailable: {exc}")
    return TiktokenEncoder()


@pytest.fixture(scope="session")
def esbuild() -> EsbuildTranspiler:
    if shutil.which("esbuild") is None:
        pytest.skip("esbuild executable not on PATH")
    return EsbuildTranspiler()


@pytest.fixture(scope="session")
def hf_model_name() -> str:
    """A small hub tokenizer; skips when the hub cannot be reached."""
    from tokenizers import Tokenizer

    name = "bert-base-uncased"
    try:
        Tokenizer.from_pretrained(name)
    except Exception as exc:  # noqa: BLE001
        pytest.skip(f"Hugging Face hub unavailable: {exc}")
    return name


@pytest.fixture
def hf_tokenizer() -> HuggingFaceTokenizer:
    return HuggingFaceTokenizer()
