"""Try-on history models."""

import time
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


def _new_result_id() -> str:
    """Millisecond epoch timestamp as an opaque id."""
    return str(time.time_ns() // 1_000_000)


class TryOnResult(BaseModel):
    """A person image, a clothing image and the composite generated from them."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(default_factory=_new_result_id)
    person_image: str = Field(alias="personImage")
    clothing_image: str = Field(alias="clothingImage")
    result_image: str = Field(alias="resultImage")
    timestamp: datetime = Field(default_factory=datetime.now)

    def format_time(self) -> str:
        """Short display time, e.g. 'Oct 19, 08:30 PM'."""
        return f"{self.timestamp:%b} {self.timestamp.day}, {self.timestamp:%I:%M %p}"
