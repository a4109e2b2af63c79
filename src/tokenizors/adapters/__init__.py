from tokenizors.adapters.css import CssMinifier
from tokenizors.adapters.esbuild import EsbuildTranspiler
from tokenizors.adapters.hf_tokenizer import HuggingFaceTokenizer
from tokenizors.adapters.memory import (
    InMemoryCssMinifier,
    InMemoryEncoder,
    InMemoryPretrainedTokenizer,
    InMemoryTranspiler,
)
from tokenizors.adapters.tiktoken_encoder import TiktokenEncoder

__all__ = [
    "CssMinifier",
    "EsbuildTranspiler",
    "HuggingFaceTokenizer",
    "InMemoryCssMinifier",
    "InMemoryEncoder",
    "InMemoryPretrainedTokenizer",
    "InMemoryTranspiler",
    "TiktokenEncoder",
]
