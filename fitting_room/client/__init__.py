"""In-memory client for the virtual try-on page."""

from ..services import TryOnApiClient
from .state import AppState, AppStore
from .tool import GenerationState, InvalidTransition, Notification, TryOnTool
from .uploads import ImageFile, SlotKind, UploadSlot


class FittingRoomApp:
    """Page-level wiring: the tool's results flow into the app store's history."""

    def __init__(self, api: TryOnApiClient | None = None, store: AppStore | None = None):
        self.store = store or AppStore()
        self.tool = TryOnTool(
            api=api or TryOnApiClient(),
            on_new_result=self.store.add_result,
        )

    @property
    def state(self) -> AppState:
        return self.store.state

    async def close(self):
        await self.tool.api.close()


__all__ = [
    "AppState",
    "AppStore",
    "FittingRoomApp",
    "GenerationState",
    "ImageFile",
    "InvalidTransition",
    "Notification",
    "SlotKind",
    "TryOnTool",
    "UploadSlot",
]
