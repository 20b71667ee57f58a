"""Where everyone is, and which clues are still lying around."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from redherring.clues.models import ClueInfo, ClueItem
from redherring.game.scenes import Position
from redherring.util.rng import Rng


@dataclass
class RoomBoard:
    clue_rooms: tuple[str, ...]
    clues: dict[str, list[ClueItem]] = field(default_factory=dict)
    person_rooms: dict[int, str] = field(default_factory=dict)
    # The clue each person picked up this search round. At most one plain
    # clue per person, never a fact combined from several clues.
    round_clues: dict[int, ClueInfo | None] = field(default_factory=dict)

    def scatter(self, items: Iterable[ClueItem], rng: Rng) -> None:
        for item in items:
            room = self.clue_rooms[rng.randrange(len(self.clue_rooms))]
            self.clues.setdefault(room, []).append(item)

    def clues_in(self, room: str | None) -> list[ClueItem]:
        if room is None:
            return []
        return list(self.clues.get(room, []))

    def take_clue(self, room: str, index: int) -> ClueItem:
        pool = self.clues.get(room, [])
        if not 0 <= index < len(pool):
            raise IndexError(f"No clue {index} in {room}")
        return pool.pop(index)

    def take_random_clue(self, room: str, rng: Rng) -> ClueItem | None:
        pool = self.clues.get(room, [])
        if not pool:
            return None
        return pool.pop(rng.randrange(len(pool)))

    def move(self, person_id: int, room: str) -> None:
        self.person_rooms[person_id] = room

    def room_of(self, person_id: int) -> str | None:
        return self.person_rooms.get(person_id)

    def assign_distinct_rooms(self, person_ids: list[int], rng: Rng) -> dict[int, str]:
        picks = rng.distinct_indices(len(self.clue_rooms), len(person_ids))
        return {
            person_id: self.clue_rooms[pick] for person_id, pick in zip(person_ids, picks)
        }

    def reset_round(self) -> None:
        self.round_clues.clear()

    def record_round_clue(self, person_id: int, info: ClueInfo) -> None:
        self.round_clues[person_id] = info

    def spawn_layout(self, room: str, origin: float, step: float) -> list[tuple[ClueItem, Position]]:
        layout = []
        x = origin
        for item in self.clues_in(room):
            layout.append((item, (x, 0.0, 0.0)))
            x += step
        return layout
