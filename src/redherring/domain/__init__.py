"""Fact model: nouns, verbs, polarity and symmetric sentences."""

from redherring.domain.enums import (
    HAIR_COLORS,
    IDENTITIES,
    Adverb,
    GameStage,
    Noun,
    NounType,
    SoundCue,
    Verb,
    nouns_of_type,
)
from redherring.domain.rules import (
    DialogError,
    InvalidClue,
    InvalidSentence,
    InvariantViolation,
    PresentationMismatch,
    StageError,
)
from redherring.domain.sentence import Sentence

__all__ = [
    "DialogError",
    "HAIR_COLORS",
    "IDENTITIES",
    "Adverb",
    "GameStage",
    "Noun",
    "NounType",
    "SoundCue",
    "Verb",
    "nouns_of_type",
    "InvalidClue",
    "InvalidSentence",
    "InvariantViolation",
    "PresentationMismatch",
    "StageError",
    "Sentence",
]
