"""Seeded randomness, so one seed always plays out the same evening."""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Rng:
    seed: int

    def __post_init__(self) -> None:
        self._random = random.Random(self.seed)

    def fork(self, salt: str) -> "Rng":
        """Independent stream for one concern (mystery setup, room picks, ...)."""
        digest = hashlib.sha256(f"{self.seed}:{salt}".encode("ascii")).hexdigest()
        return Rng(int(digest[:16], 16))

    def randrange(self, stop: int) -> int:
        return self._random.randrange(stop)

    def choice(self, seq: Sequence[T]) -> T:
        return self._random.choice(seq)

    def shuffle(self, seq: list[T]) -> None:
        self._random.shuffle(seq)

    def distinct_indices(self, size: int, count: int) -> list[int]:
        """Pick ``count`` different indices from ``range(size)``."""
        if count > size:
            raise ValueError(f"cannot pick {count} distinct indices from {size}")
        return self._random.sample(range(size), count)
