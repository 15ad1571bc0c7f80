"""Shared utilities."""

from .data_uri import to_data_uri, declared_type, is_image_type

__all__ = [
    "to_data_uri",
    "declared_type",
    "is_image_type",
]
