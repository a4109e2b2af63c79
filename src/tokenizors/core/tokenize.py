import logging

from tokenizors.core.errors import AdapterError, AdapterInputError, AdapterSystemError
from tokenizors.core.ports.tokenizer import EncoderPort, PretrainedTokenizerPort
from tokenizors.core.results import Err, Ok, Result, TokenizationResult

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "cl100k_base"


async def count_encoder_tokens(
    encoder: EncoderPort,
    text: str,
    encoding: str | None = None,
) -> Result[TokenizationResult]:
    """Count BPE tokens of ``text`` with the named encoding (``cl100k_base`` by default)."""
    name = encoding or DEFAULT_ENCODING
    try:
        count = await encoder.count(text, name)
    except AdapterInputError as exc:
        logger.info("Encoder rejected %s: %s", name, exc.message)
        return Err(exc)
    except AdapterError as exc:
        logger.error("Encoder tokenization with %s failed: %s", name, exc.message)
        return Err(exc)
    except Exception as exc:
        logger.exception("Unexpected encoder failure with %s", name)
        return Err(AdapterSystemError("Unexpected encoder failure.", str(exc)))
    return Ok(TokenizationResult(token_count=count))


async def count_pretrained_tokens(
    tokenizer: PretrainedTokenizerPort,
    text: str,
    model_name: str,
) -> Result[TokenizationResult]:
    """Count input ids produced by the pretrained tokenizer ``model_name``."""
    try:
        count = await tokenizer.count(text, model_name)
    except AdapterError as exc:
        logger.error("Pretrained tokenization with %s failed: %s", model_name, exc.details or exc.message)
        return Err(exc)
    except Exception as exc:
        logger.exception("Unexpected pretrained tokenizer failure with %s", model_name)
        return Err(AdapterSystemError("Unexpected tokenizer failure.", str(exc)))
    return Ok(TokenizationResult(token_count=count))
