"""Asset lookup by name."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import yaml

from redherring import config

logger = logging.getLogger(__name__)

EMPTY_NAMES = ("", "None")


class SpriteRegistry:
    """Maps sprite names to asset references.

    Unknown names are a content problem rather than a crash: they are logged
    and resolve to ``None`` so the caller shows nothing.
    """

    def __init__(self, groups: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._sprites: dict[str, str] = {}
        for group in (groups or {}).values():
            for name, asset in (group or {}).items():
                self._sprites[str(name)] = str(asset)

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> "SpriteRegistry":
        sprite_path = Path(path or config.SPRITES_PATH)
        data = yaml.safe_load(sprite_path.read_text(encoding="utf-8")) or {}
        return cls(data)

    def __contains__(self, name: object) -> bool:
        return name in self._sprites

    def get(self, name: str | None) -> str | None:
        if name is None or name in EMPTY_NAMES:
            return None
        asset = self._sprites.get(name)
        if asset is None:
            logger.warning("No sprite found for name: %s", name)
        return asset

    def resolve(self, names: list[str]) -> list[str]:
        return [asset for asset in (self.get(name) for name in names) if asset is not None]
