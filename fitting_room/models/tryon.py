"""Wire models for the try-on proxy endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class TryOnRequest(BaseModel):
    """Request body for try-on generation.

    Both images are optional at the schema level so that a missing field is
    answered with a 400 error payload instead of a schema validation error.
    """
    model_config = ConfigDict(populate_by_name=True)

    person_image: str | None = Field(default=None, alias="personImage")  # data URI
    clothing_image: str | None = Field(default=None, alias="clothingImage")  # data URI

    @property
    def is_complete(self) -> bool:
        """Both images present and non-empty."""
        return bool(self.person_image) and bool(self.clothing_image)


class TryOnResponse(BaseModel):
    """Successful response with the generated (or echoed) image."""
    model_config = ConfigDict(populate_by_name=True)

    result_image: str = Field(alias="resultImage")
    message: str


class ErrorResponse(BaseModel):
    """Error payload returned with every non-200 status."""
    error: str
