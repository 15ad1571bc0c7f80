"""Virtual try-on tool: two upload slots, a single-flight generate action, a result."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from ..models import TryOnResult
from ..services import TryOnApiClient, TryOnRequestError
from .uploads import ImageFile, SlotKind, UploadSlot


logger = logging.getLogger(__name__)


GENERIC_FAILURE = "Something went wrong. Please try again."


class GenerationState(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


TRANSITIONS: dict[GenerationState, frozenset[GenerationState]] = {
    GenerationState.IDLE: frozenset({GenerationState.REQUESTING}),
    GenerationState.REQUESTING: frozenset({GenerationState.SUCCEEDED, GenerationState.FAILED}),
    GenerationState.SUCCEEDED: frozenset({GenerationState.REQUESTING, GenerationState.IDLE}),
    GenerationState.FAILED: frozenset({GenerationState.REQUESTING, GenerationState.IDLE}),
}


class InvalidTransition(RuntimeError):
    """A generation state change that the state machine does not allow."""


@dataclass(frozen=True)
class Notification:
    """A dismissable toast."""
    title: str
    description: str
    variant: str = "default"  # "default" or "destructive"


class TryOnTool:
    """The upload-and-generate tool.

    Only one generation may be in flight at a time: while the state is
    REQUESTING, ``can_generate`` is False and ``generate`` returns without
    making a request. The slots are locked for the same span, so the reply
    always belongs to the images on display.
    """

    def __init__(
        self,
        api: TryOnApiClient,
        on_new_result: Callable[[TryOnResult], None] | None = None,
        notify: Callable[[Notification], None] | None = None,
    ):
        self.api = api
        self.on_new_result = on_new_result or (lambda result: None)
        self.notifications: list[Notification] = []
        self._notify = notify or self.notifications.append

        self.slots = {
            SlotKind.PERSON: UploadSlot(SlotKind.PERSON),
            SlotKind.CLOTHING: UploadSlot(SlotKind.CLOTHING),
        }
        self.result: str | None = None
        self.state = GenerationState.IDLE

    @property
    def person_image(self) -> str | None:
        return self.slots[SlotKind.PERSON].image

    @property
    def clothing_image(self) -> str | None:
        return self.slots[SlotKind.CLOTHING].image

    @property
    def is_processing(self) -> bool:
        return self.state is GenerationState.REQUESTING

    @property
    def can_generate(self) -> bool:
        """Whether the generate trigger is enabled."""
        return bool(self.person_image and self.clothing_image) and not self.is_processing

    # Uploads

    async def upload(self, kind: SlotKind, file: ImageFile):
        """Store the file in its slot; the old result no longer matches the inputs.

        Ignored while a request is in flight so the reply always matches the slots.
        """
        if self.is_processing:
            return
        self.slots[kind].fill(file.to_data_uri())
        self.result = None

    async def select_files(self, kind: SlotKind, files: Sequence[ImageFile]):
        file = self.slots[kind].select(files)
        if file is not None:
            await self.upload(kind, file)

    async def drop_files(self, kind: SlotKind, files: Sequence[ImageFile]):
        file = self.slots[kind].drop(files)
        if file is not None:
            await self.upload(kind, file)

    def remove(self, kind: SlotKind):
        """Empty a slot and drop the result tied to it. Ignored while a request is in flight."""
        if self.is_processing:
            return
        self.slots[kind].clear()
        self.result = None

    def reset(self):
        """Clear both slots and the result. Ignored while a request is in flight."""
        if self.is_processing:
            return
        for slot in self.slots.values():
            slot.clear()
        self.result = None
        if self.state is not GenerationState.IDLE:
            self._transition(GenerationState.IDLE)

    # Generation

    async def generate(self) -> TryOnResult | None:
        """Send both images to the proxy and record the result.

        Returns the new history entry, or None if nothing was generated.
        """
        if not self.can_generate:
            return None

        person_image = self.person_image
        clothing_image = self.clothing_image

        self._transition(GenerationState.REQUESTING)
        final_state = GenerationState.FAILED

        try:
            data = await self.api.invoke(person_image, clothing_image)

            if data.get("error"):
                raise TryOnRequestError(data["error"])

            result_image = data.get("resultImage") or person_image
            self.result = result_image

            entry = TryOnResult(
                person_image=person_image,
                clothing_image=clothing_image,
                result_image=result_image,
            )
            self.on_new_result(entry)
            final_state = GenerationState.SUCCEEDED

            self._notify(Notification(
                title="Virtual Try-On Complete!",
                description="Your AI-generated look is ready.",
            ))
            return entry

        except Exception as e:
            logger.error("Error generating try-on: %s", e)
            self._notify(Notification(
                title="Generation Failed",
                description=str(e) or GENERIC_FAILURE,
                variant="destructive",
            ))
            return None

        finally:
            self._transition(final_state)

    def _transition(self, target: GenerationState):
        if target not in TRANSITIONS[self.state]:
            raise InvalidTransition(f"{self.state.value} -> {target.value}")
        self.state = target
