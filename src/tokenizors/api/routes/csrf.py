import logging

from fastapi import APIRouter, Request

from tokenizors.api.errors import ApiError
from tokenizors.api.middleware import issue_csrf_token
from tokenizors.api.schemas import CsrfTokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["csrf"])


@router.get("/csrf-token", response_model=CsrfTokenResponse)
async def csrf_token(request: Request) -> CsrfTokenResponse:
    """Token to send back in ``X-CSRF-Token`` on POST requests. Never cached: it is per session."""
    try:
        token = issue_csrf_token(request)
    except Exception as exc:
        logger.exception("Error generating CSRF token")
        raise ApiError(500, "Failed to generate CSRF token") from exc
    logger.info("CSRF token generated successfully")
    return CsrfTokenResponse(csrf_token=token)
