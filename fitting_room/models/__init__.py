"""Data models for the Fitting Room service."""

from .tryon import TryOnRequest, TryOnResponse, ErrorResponse
from .outcome import OutcomeKind, TryOnOutcome
from .history import TryOnResult

__all__ = [
    "TryOnRequest",
    "TryOnResponse",
    "ErrorResponse",
    "OutcomeKind",
    "TryOnOutcome",
    "TryOnResult",
]
