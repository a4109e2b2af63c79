from fastapi import APIRouter, Depends, Request

from tokenizors.api.cache import cached
from tokenizors.api.dependencies import get_app_settings, get_encoder, get_pretrained_tokenizer
from tokenizors.api.errors import require, unwrap
from tokenizors.api.schemas import EncodingsResponse, TokenCountResponse, TokenizeHFRequest, TokenizeOpenAIRequest
from tokenizors.config import Settings
from tokenizors.core.ports.tokenizer import EncoderPort, PretrainedTokenizerPort
from tokenizors.core.tokenize import count_encoder_tokens, count_pretrained_tokens

router = APIRouter(prefix="/tokenize", tags=["tokenize"])


@router.post("/openai", response_model=TokenCountResponse)
async def tokenize_openai(
    body: TokenizeOpenAIRequest | None = None,
    encoder: EncoderPort = Depends(get_encoder),
    settings: Settings = Depends(get_app_settings),
) -> TokenCountResponse:
    """Count tokens with a tiktoken encoding (``cl100k_base`` unless ``model`` names another)."""
    body = body or TokenizeOpenAIRequest()
    text = require(body.text, "Text", "tokenization")
    result = await count_encoder_tokens(encoder, text, body.model or settings.default_encoding)
    counted = unwrap(result, "Failed to tokenize text for OpenAI")
    return TokenCountResponse(token_count=counted.token_count)


@router.post("/hf", response_model=TokenCountResponse)
async def tokenize_hf(
    body: TokenizeHFRequest | None = None,
    tokenizer: PretrainedTokenizerPort = Depends(get_pretrained_tokenizer),
) -> TokenCountResponse:
    """Count input ids of a pretrained Hugging Face tokenizer."""
    body = body or TokenizeHFRequest()
    text = require(body.text, "Text", "HF tokenization")
    model_name = require(body.model_name, "modelName", "HF tokenization")
    result = await count_pretrained_tokens(tokenizer, text, model_name)
    counted = unwrap(result, "Failed to tokenize text for Hugging Face")
    return TokenCountResponse(token_count=counted.token_count)


@router.get("/encodings", response_model=EncodingsResponse)
@cached
async def encodings(
    request: Request,
    encoder: EncoderPort = Depends(get_encoder),
    settings: Settings = Depends(get_app_settings),
) -> EncodingsResponse:
    """List the encodings accepted by ``/tokenize/openai``."""
    return EncodingsResponse(encodings=encoder.encodings(), default=settings.default_encoding)
