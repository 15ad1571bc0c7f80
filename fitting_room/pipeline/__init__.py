"""Try-on generation pipeline."""

from .tryon_pipeline import TryOnPipeline, TRYON_PROMPT, classify_gateway_status

__all__ = [
    "TryOnPipeline",
    "TRYON_PROMPT",
    "classify_gateway_status",
]
