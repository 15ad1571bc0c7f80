"""Upload slots: one image payload per slot, filled by picker or drag-and-drop."""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Sequence

from ..utils import declared_type, is_image_type, to_data_uri


class SlotKind(str, Enum):
    PERSON = "person"
    CLOTHING = "clothing"


SLOT_COPY = {
    SlotKind.PERSON: ("Upload Your Photo", "Full-body photo for best results"),
    SlotKind.CLOTHING: ("Upload Clothing Image", "Any garment from any online store"),
}


@dataclass(frozen=True)
class ImageFile:
    """A user-supplied file with its declared content type."""
    name: str
    content_type: str
    data: bytes

    @classmethod
    async def from_path(cls, path: Path) -> "ImageFile":
        """Read a local file without blocking the event loop."""
        path = Path(path)
        data = await asyncio.to_thread(path.read_bytes)
        return cls(name=path.name, content_type=declared_type(path), data=data)

    def to_data_uri(self) -> str:
        return to_data_uri(self.data, self.content_type)


@dataclass
class UploadSlot:
    """Holds at most one image payload; replacing overwrites, removing clears."""
    kind: SlotKind
    image: str | None = None
    is_dragging: bool = field(default=False, compare=False)

    @property
    def title(self) -> str:
        return SLOT_COPY[self.kind][0]

    @property
    def description(self) -> str:
        return SLOT_COPY[self.kind][1]

    @property
    def is_filled(self) -> bool:
        return bool(self.image)

    def drag_over(self):
        self.is_dragging = True

    def drag_leave(self):
        self.is_dragging = False

    def drop(self, files: Sequence[ImageFile]) -> ImageFile | None:
        """Accept the first dropped file if its declared type is an image."""
        self.is_dragging = False
        file = files[0] if files else None
        if file is not None and is_image_type(file.content_type):
            return file
        return None

    def select(self, files: Sequence[ImageFile]) -> ImageFile | None:
        """Accept the first picked file; the picker has no content-type gate."""
        return files[0] if files else None

    def fill(self, image: str):
        self.image = image

    def clear(self):
        self.image = None
