"""Stage orchestration, rooms and scripted scenes."""

from redherring.game.rooms import RoomBoard
from redherring.game.scenes import LoadOperation, LoadState, SceneLoader
from redherring.game.scripts import accusation_line
from redherring.game.state import GameState

__all__ = [
    "RoomBoard",
    "LoadOperation",
    "LoadState",
    "SceneLoader",
    "accusation_line",
    "GameState",
]
