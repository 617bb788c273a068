import logging
import time

from app.schemas.request import GenerationRequest
from app.schemas.response import GenerationResponse
from app.chains.post_chain import post_chain
from app.services.prompt_composer import SYSTEM_PROMPT, compose_prompt
from app.utils.errors import ConfigurationError, TopicRequiredError, UpstreamError
from app.utils.normalizer import response_normalizer
from app.config.settings import settings

logger = logging.getLogger(__name__)


class PostGeneratorService:

    def __init__(self):
        self.chain = post_chain
        self.normalizer = response_normalizer

    async def generate_post(self, request: GenerationRequest) -> GenerationResponse:
        """
        Generate marketing post variants for one request.

        Pipeline:
        1. Reject a missing topic, then a missing API key (no external call either way)
        2. Compose the prompt
        3. Single completion call
        4. Normalize the raw reply into variants
        5. Return response
        """
        if not request.has_topic:
            logger.info("Rejected generate-post request without a topic")
            raise TopicRequiredError()

        if not settings.openai_api_key:
            logger.error("OPENAI_API_KEY is not set; cannot generate posts")
            raise ConfigurationError()

        start_time = time.time()
        user_prompt = compose_prompt(request)

        try:
            raw_text = await self.chain.complete(SYSTEM_PROMPT, user_prompt)
            variants = self.normalizer.normalize(raw_text)
        except Exception as e:
            logger.exception(f"Post generation failed for topic '{request.topic}'")
            raise UpstreamError(details=str(e) or e.__class__.__name__) from e

        generation_time = (time.time() - start_time) * 1000
        logger.info(
            f"Generated {len(variants)}/{request.variants_count} variants "
            f"for platform={request.platform.value} in {generation_time:.0f}ms"
        )

        return GenerationResponse(
            topic=request.topic,
            platform=request.platform.value,
            tone=request.tone.value,
            language=request.language.value,
            goal=request.goal.value,
            audience=request.audience.value,
            style=request.style.value,
            variants_count=len(variants),
            requested_variants_count=request.variants_count,
            variants=variants
        )


# Global generator service instance
generator_service = PostGeneratorService()
