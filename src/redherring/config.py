"""Game configuration: module defaults plus YAML-backed settings."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

SEED = 1337
DATA_DIR = Path(__file__).resolve().parent / "data"
GAME_SETTINGS_PATH = DATA_DIR / "game.yml"
SPRITES_PATH = DATA_DIR / "sprites.yml"


class GameSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    opening_room: str = "Lounge"
    end_room: str = "EndScene"
    clue_rooms: tuple[str, ...] = ("Bedroom1", "Bedroom2", "Bedroom3")
    player_id: int = 0
    clue_spawn_origin: float = -2.0
    clue_spawn_step: float = 1.0
    max_reactions: int = Field(default=2, ge=0)


_SETTINGS_CACHE: dict[Path, GameSettings] = {}


def load_game_settings(path: Path | None = None) -> GameSettings:
    """Load game settings from YAML once per path and cache them."""
    settings_path = Path(path or GAME_SETTINGS_PATH)
    cached = _SETTINGS_CACHE.get(settings_path)
    if cached is not None:
        return cached
    data = yaml.safe_load(settings_path.read_text(encoding="utf-8")) or {}
    settings = GameSettings.model_validate(data.get("game", data))
    _SETTINGS_CACHE[settings_path] = settings
    return settings
