"""External service clients."""

from .gateway_client import AIGatewayClient, GatewayStatusError, extract_generated_image
from .proxy_client import TryOnApiClient, TryOnRequestError

__all__ = [
    "AIGatewayClient",
    "GatewayStatusError",
    "extract_generated_image",
    "TryOnApiClient",
    "TryOnRequestError",
]
