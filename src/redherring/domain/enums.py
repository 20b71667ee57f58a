"""Vocabulary shared by the fact model, dialogue and stage machine."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class NounType(StrEnum):
    HAIR_COLOR = "hair_color"
    IDENTITY = "identity"
    UNIQUE = "unique"


class Noun(StrEnum):
    BLONDE = "Blonde"
    BROWN = "Brown"
    RED = "Red"
    BROTHER = "Brother"
    BUSINESS_PARTNER = "Business Partner"
    BUTLER = "Butler"
    KILLER = "Killer"
    KNIFE = "Knife"
    VICTIM = "Victim"

    @property
    def type(self) -> NounType:
        return NOUN_TYPES[self]


NOUN_TYPES: dict[Noun, NounType] = {
    Noun.BLONDE: NounType.HAIR_COLOR,
    Noun.BROWN: NounType.HAIR_COLOR,
    Noun.RED: NounType.HAIR_COLOR,
    Noun.BROTHER: NounType.IDENTITY,
    Noun.BUSINESS_PARTNER: NounType.IDENTITY,
    Noun.BUTLER: NounType.IDENTITY,
    Noun.KILLER: NounType.UNIQUE,
    Noun.KNIFE: NounType.UNIQUE,
    Noun.VICTIM: NounType.UNIQUE,
}

# Suspects are named by hair color; this order breaks ties in accusations.
HAIR_COLORS = (Noun.BLONDE, Noun.BROWN, Noun.RED)
IDENTITIES = (Noun.BROTHER, Noun.BUSINESS_PARTNER, Noun.BUTLER)


def nouns_of_type(noun_type: NounType) -> list[Noun]:
    return [noun for noun in Noun if noun.type == noun_type]


class Verb(StrEnum):
    IS = "Is"
    HAS = "Has"


class Adverb(StrEnum):
    TRUE = "True"
    FALSE = "False"

    def flipped(self) -> "Adverb":
        return Adverb.FALSE if self is Adverb.TRUE else Adverb.TRUE


class GameStage(IntEnum):
    MENU = 0
    INTRO = 1
    SEARCH_1 = 2
    COMMUNAL_1 = 3
    SEARCH_2 = 4
    COMMUNAL_2 = 5
    SEARCH_3 = 6
    COMMUNAL_3 = 7
    POLICE = 8
    REVEAL = 9

    @property
    def is_search(self) -> bool:
        return self in (GameStage.SEARCH_1, GameStage.SEARCH_2, GameStage.SEARCH_3)

    @property
    def is_communal(self) -> bool:
        return self in (GameStage.COMMUNAL_1, GameStage.COMMUNAL_2, GameStage.COMMUNAL_3)

    def next(self) -> "GameStage":
        if self is GameStage.REVEAL:
            return self
        return GameStage(self + 1)


class SoundCue(StrEnum):
    NONE = "none"
    GASP = "gasp"
    HMM = "hmm"
    AHA = "aha"
    DRAMATIC = "dramatic"
