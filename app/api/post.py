import logging
from typing import Optional

from fastapi import APIRouter, Body

from app.schemas.request import GenerationRequest
from app.schemas.response import GenerationResponse, ErrorResponse
from app.services.generator import generator_service
from app.utils.errors import PostGenerationError, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/generate-post",
    response_model=GenerationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def generate_post(request: Optional[GenerationRequest] = Body(default=None)):
    """
    Generate marketing post variants for a topic.

    This is the main API endpoint. It returns:
    - The resolved request parameters
    - The normalized variants (hook, caption, hashtags)
    - How many variants were produced

    A request without a body is treated like one without a topic.
    """
    if request is None:
        request = GenerationRequest()
    try:
        return await generator_service.generate_post(request)
    except PostGenerationError:
        raise
    except Exception as e:
        logger.exception("Unexpected error while generating post")
        raise UpstreamError(details=str(e) or e.__class__.__name__) from e
