"""Scene loading interface used for room transitions."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol

from redherring.clues.models import ClueItem

Position = tuple[float, float, float]


class LoadState(StrEnum):
    NONE = "none"
    UNLOADING = "unloading"
    LOADING = "loading"


class LoadOperation(Protocol):
    @property
    def is_done(self) -> bool: ...


class SceneLoader(Protocol):
    def unload(self, name: str) -> LoadOperation: ...

    def load(self, name: str) -> LoadOperation:
        """Load a room additively, keeping the game objects alive."""
        ...

    def set_active(self, name: str) -> None: ...

    def spawn_clue(self, item: ClueItem, position: Position) -> None: ...
