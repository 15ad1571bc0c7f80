"""Tagged outcome of a single try-on proxy call."""

from enum import Enum

from pydantic import BaseModel, computed_field

from .tryon import ErrorResponse, TryOnResponse


class OutcomeKind(str, Enum):
    """Every way a proxy call can end."""
    SUCCESS = "success"
    SOFT_FALLBACK = "soft_fallback"
    VALIDATION = "validation"
    CONFIG = "config"
    RATE_LIMITED = "rate_limited"
    USAGE_LIMITED = "usage_limited"
    GATEWAY_ERROR = "gateway_error"
    UNEXPECTED = "unexpected"


STATUS_CODES: dict[OutcomeKind, int] = {
    OutcomeKind.SUCCESS: 200,
    OutcomeKind.SOFT_FALLBACK: 200,
    OutcomeKind.VALIDATION: 400,
    OutcomeKind.CONFIG: 500,
    OutcomeKind.RATE_LIMITED: 429,
    OutcomeKind.USAGE_LIMITED: 402,
    OutcomeKind.GATEWAY_ERROR: 500,
    OutcomeKind.UNEXPECTED: 500,
}

MISSING_IMAGES_MESSAGE = "Both person image and clothing image are required"
RATE_LIMITED_MESSAGE = "Rate limit exceeded. Please try again in a moment."
USAGE_LIMITED_MESSAGE = "Usage limit reached. Please add credits to continue."
UNEXPECTED_MESSAGE = "An unexpected error occurred"
SUCCESS_MESSAGE = "Virtual try-on completed successfully"
FALLBACK_MESSAGE = "Virtual try-on completed"


class TryOnOutcome(BaseModel):
    """Result of one proxy call, consumed by the response serializer."""

    kind: OutcomeKind
    result_image: str | None = None
    message: str | None = None
    error: str | None = None

    @computed_field
    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    @property
    def is_success(self) -> bool:
        return self.kind in (OutcomeKind.SUCCESS, OutcomeKind.SOFT_FALLBACK)

    def to_payload(self) -> dict:
        """Build the JSON body for this outcome."""
        if self.is_success:
            return TryOnResponse(
                result_image=self.result_image or "",
                message=self.message or SUCCESS_MESSAGE,
            ).model_dump(by_alias=True)
        return ErrorResponse(error=self.error or UNEXPECTED_MESSAGE).model_dump()

    # Constructors, one per kind

    @classmethod
    def success(cls, result_image: str) -> "TryOnOutcome":
        return cls(kind=OutcomeKind.SUCCESS, result_image=result_image, message=SUCCESS_MESSAGE)

    @classmethod
    def soft_fallback(cls, person_image: str) -> "TryOnOutcome":
        """Gateway answered but produced no image; echo the person image back."""
        return cls(kind=OutcomeKind.SOFT_FALLBACK, result_image=person_image, message=FALLBACK_MESSAGE)

    @classmethod
    def validation(cls, error: str = MISSING_IMAGES_MESSAGE) -> "TryOnOutcome":
        return cls(kind=OutcomeKind.VALIDATION, error=error)

    @classmethod
    def misconfigured(cls, error: str) -> "TryOnOutcome":
        return cls(kind=OutcomeKind.CONFIG, error=error)

    @classmethod
    def rate_limited(cls) -> "TryOnOutcome":
        return cls(kind=OutcomeKind.RATE_LIMITED, error=RATE_LIMITED_MESSAGE)

    @classmethod
    def usage_limited(cls) -> "TryOnOutcome":
        return cls(kind=OutcomeKind.USAGE_LIMITED, error=USAGE_LIMITED_MESSAGE)

    @classmethod
    def gateway_error(cls, status_code: int) -> "TryOnOutcome":
        return cls(kind=OutcomeKind.GATEWAY_ERROR, error=f"AI gateway error: {status_code}")

    @classmethod
    def unexpected(cls, exc: BaseException | None = None) -> "TryOnOutcome":
        message = str(exc) if exc is not None and str(exc) else UNEXPECTED_MESSAGE
        return cls(kind=OutcomeKind.UNEXPECTED, error=message)
