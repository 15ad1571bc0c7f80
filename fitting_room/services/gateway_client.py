"""AI gateway client for multimodal virtual try-on generation."""

import logging
from typing import Any

import httpx

from ..config import GatewayConfig


logger = logging.getLogger(__name__)


class GatewayStatusError(RuntimeError):
    """The gateway answered with a non-success status code."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"AI gateway error: {status_code}")
        self.status_code = status_code
        self.body = body


class AIGatewayClient:
    """Client for an OpenAI-style chat completions gateway with image output."""

    def __init__(self, config: GatewayConfig):
        self.config = config
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
        return self._client

    async def generate_tryon(
        self,
        person_image: str,
        clothing_image: str,
        prompt: str,
        api_key: str,
    ) -> str | None:
        """Ask the gateway to dress the person in the garment.

        Args:
            person_image: Data URI (or URL) of the person photo, sent first
            clothing_image: Data URI (or URL) of the garment photo, sent second
            prompt: Instruction text placed before both images
            api_key: Bearer token for the gateway

        Returns:
            URL or data URI of the generated image, or None if the gateway
            answered without one

        Raises:
            GatewayStatusError: if the gateway returns a non-2xx status
        """
        payload = self._build_payload(person_image, clothing_image, prompt)

        response = await self.client.post(
            self.config.url,
            json=payload,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
        )

        if not response.is_success:
            raise GatewayStatusError(response.status_code, response.text[:500])

        return extract_generated_image(response.json())

    def _build_payload(
        self,
        person_image: str,
        clothing_image: str,
        prompt: str,
    ) -> dict[str, Any]:
        """Build a single-message request with the text and both images."""
        return {
            "model": self.config.model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {"type": "image_url", "image_url": {"url": person_image}},
                        {"type": "image_url", "image_url": {"url": clothing_image}},
                    ],
                }
            ],
            "modalities": ["image", "text"],
        }

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None


def extract_generated_image(data: Any) -> str | None:
    """Read choices[0].message.images[0].image_url.url, tolerating any gap."""
    try:
        url = data["choices"][0]["message"]["images"][0]["image_url"]["url"]
    except (KeyError, IndexError, TypeError):
        return None
    return url if isinstance(url, str) and url else None
