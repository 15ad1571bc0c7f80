"""Try-on pipeline: one gateway round trip, classified into an outcome."""

import logging

from ..config import ConfigurationError, ProxyConfig
from ..models import TryOnOutcome, TryOnRequest
from ..services import AIGatewayClient, GatewayStatusError


logger = logging.getLogger(__name__)


TRYON_PROMPT = (
    "Create a realistic virtual try-on image. Take the person from the first "
    "image and show them wearing the clothing item from the second image. The "
    "result should look natural and realistic, as if the person is actually "
    "wearing the garment. Maintain the person's pose, body proportions, and "
    "setting from the original photo."
)


def classify_gateway_status(status_code: int) -> TryOnOutcome:
    """Map a failed gateway status to the outcome reported to the caller."""
    if status_code == 429:
        return TryOnOutcome.rate_limited()
    if status_code == 402:
        return TryOnOutcome.usage_limited()
    return TryOnOutcome.gateway_error(status_code)


class TryOnPipeline:
    """Forwards a person photo and a garment photo to the AI gateway.

    Flow:
    1. Validate that both images are present
    2. Check the gateway credential is configured
    3. Submit one multimodal request (no retries)
    4. Classify the reply into a TryOnOutcome

    Faults outside these steps propagate to the caller.
    """

    def __init__(self, config: ProxyConfig):
        self.config = config
        self.gateway = AIGatewayClient(config=config.gateway)

    async def run(self, request: TryOnRequest) -> TryOnOutcome:
        """Run a single try-on generation.

        Args:
            request: Person and clothing images as data URIs

        Returns:
            TryOnOutcome describing the result or the failure category
        """
        if not request.is_complete:
            logger.info("Rejecting try-on request with a missing image")
            return TryOnOutcome.validation()

        try:
            api_key = self._require_api_key()
        except ConfigurationError as e:
            logger.error("Configuration error: %s", e)
            return TryOnOutcome.misconfigured(str(e))

        logger.info("Starting virtual try-on generation...")

        try:
            generated = await self.gateway.generate_tryon(
                person_image=request.person_image,
                clothing_image=request.clothing_image,
                prompt=TRYON_PROMPT,
                api_key=api_key,
            )
        except GatewayStatusError as e:
            logger.error("AI gateway error: %s %s", e.status_code, e.body)
            return classify_gateway_status(e.status_code)

        logger.info("AI response received")

        if not generated:
            logger.info("No image in response, using fallback")
            return TryOnOutcome.soft_fallback(request.person_image)

        logger.info("Virtual try-on generated successfully")
        return TryOnOutcome.success(generated)

    def _require_api_key(self) -> str:
        key = self.config.gateway_api_key
        if not key:
            raise ConfigurationError("LOVABLE_API_KEY is not configured")
        return key

    async def close(self):
        await self.gateway.close()
