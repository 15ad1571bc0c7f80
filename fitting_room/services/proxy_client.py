"""HTTP client used by the try-on tool to reach the proxy endpoint."""

from typing import Any

import httpx


GENERIC_FAILURE = "Failed to generate try-on"


class TryOnRequestError(RuntimeError):
    """The proxy call failed or returned an error payload."""


class TryOnApiClient:
    """Calls the virtual try-on proxy endpoint."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        path: str = "/virtual-tryon",
        timeout: float = 300.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.path = path
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def invoke(self, person_image: str, clothing_image: str) -> dict[str, Any]:
        """POST both images and return the decoded JSON body.

        Raises:
            TryOnRequestError: on transport errors and non-2xx responses
        """
        try:
            response = await self.client.post(
                self.path,
                json={"personImage": person_image, "clothingImage": clothing_image},
            )
        except httpx.HTTPError as e:
            raise TryOnRequestError(str(e) or GENERIC_FAILURE) from e

        if not response.is_success:
            raise TryOnRequestError(_error_message(response))

        return response.json()

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None


def _error_message(response: httpx.Response) -> str:
    """Pull the proxy's error field out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        return GENERIC_FAILURE
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return GENERIC_FAILURE
