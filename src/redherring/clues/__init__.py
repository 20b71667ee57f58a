"""Clue models and the generators that create them."""

from redherring.clues.generators import (
    CLUE_GENERATORS,
    AppearanceIdentityClue,
    AppearanceItemClue,
    ClueGenerator,
    IdentityItemClue,
    find_generator,
    make_clue,
)
from redherring.clues.models import ClueInfo, ClueItem

__all__ = [
    "CLUE_GENERATORS",
    "AppearanceIdentityClue",
    "AppearanceItemClue",
    "ClueGenerator",
    "IdentityItemClue",
    "find_generator",
    "make_clue",
    "ClueInfo",
    "ClueItem",
]
