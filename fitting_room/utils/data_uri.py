"""Helpers for embeddable image data (data URIs)."""

import base64
import mimetypes
from pathlib import Path


DEFAULT_TYPE = "application/octet-stream"


def to_data_uri(data: bytes, content_type: str) -> str:
    """Encode raw bytes as a base64 data URI."""
    encoded = base64.b64encode(data).decode("utf-8")
    return f"data:{content_type or DEFAULT_TYPE};base64,{encoded}"


def declared_type(path: Path) -> str:
    """Content type a browser would declare for this file, from its name."""
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or DEFAULT_TYPE


def is_image_type(content_type: str | None) -> bool:
    return bool(content_type) and content_type.startswith("image/")
