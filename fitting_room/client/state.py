"""Application state container with explicit actions.

State is an immutable snapshot. Every change goes through ``dispatch``,
which runs the reducer and notifies subscribers, so the update cycle is
one-way and easy to test.
"""

from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from ..models import TryOnResult


class AppState(BaseModel):
    """Everything the page keeps in memory. Nothing survives a reload."""
    model_config = ConfigDict(frozen=True)

    dark_mode: bool = False
    history_open: bool = False
    history: tuple[TryOnResult, ...] = Field(default_factory=tuple)  # most recent first


@dataclass(frozen=True)
class ToggleDarkMode:
    pass


@dataclass(frozen=True)
class OpenHistory:
    pass


@dataclass(frozen=True)
class CloseHistory:
    pass


@dataclass(frozen=True)
class ToggleHistory:
    pass


@dataclass(frozen=True)
class AddResult:
    result: TryOnResult


@dataclass(frozen=True)
class ClearHistory:
    pass


Action = ToggleDarkMode | OpenHistory | CloseHistory | ToggleHistory | AddResult | ClearHistory


def reduce(state: AppState, action: Action) -> AppState:
    """Return the state that follows ``action``."""
    if isinstance(action, ToggleDarkMode):
        return state.model_copy(update={"dark_mode": not state.dark_mode})
    if isinstance(action, OpenHistory):
        return state.model_copy(update={"history_open": True})
    if isinstance(action, ToggleHistory):
        return state.model_copy(update={"history_open": not state.history_open})
    if isinstance(action, CloseHistory):
        return state.model_copy(update={"history_open": False})
    if isinstance(action, AddResult):
        return state.model_copy(update={"history": (action.result, *state.history)})
    if isinstance(action, ClearHistory):
        return state.model_copy(update={"history": ()})
    raise TypeError(f"Unknown action: {action!r}")


class AppStore:
    """Holds the current AppState and applies actions to it."""

    def __init__(self, state: AppState | None = None):
        self._state = state or AppState()
        self._listeners: list[Callable[[AppState], None]] = []

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Callable[[AppState], None]) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dispatch(self, action: Action) -> AppState:
        self._state = reduce(self._state, action)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    # Convenience wrappers used by the header and the history drawer

    def toggle_dark_mode(self) -> AppState:
        return self.dispatch(ToggleDarkMode())

    def open_history(self) -> AppState:
        return self.dispatch(OpenHistory())

    def toggle_history(self) -> AppState:
        return self.dispatch(ToggleHistory())

    def close_history(self) -> AppState:
        return self.dispatch(CloseHistory())

    def add_result(self, result: TryOnResult) -> AppState:
        return self.dispatch(AddResult(result))

    def clear_history(self) -> AppState:
        return self.dispatch(ClearHistory())
