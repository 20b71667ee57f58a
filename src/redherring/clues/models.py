"""Clue models: the fact a clue proves and the object that carries it."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from redherring.domain.enums import Adverb, Noun, Verb
from redherring.domain.sentence import Sentence


class ClueInfo(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    concept_a: Noun
    concept_b: Noun
    verb: Verb = Verb.IS

    def get_sentence(self) -> Sentence:
        return Sentence(self.concept_a, self.verb, self.concept_b, Adverb.TRUE)

    def __str__(self) -> str:
        return f"{self.concept_a} <-> {self.concept_b}"


class ClueItem(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    info: ClueInfo
    sprite_name: str
    description: str

    @classmethod
    def build(
        cls,
        n1: Noun,
        n2: Noun,
        sprite_name: str,
        description: str,
        verb: Verb = Verb.IS,
    ) -> "ClueItem":
        return cls(
            info=ClueInfo(concept_a=n1, concept_b=n2, verb=verb),
            sprite_name=sprite_name,
            description=description,
        )

    def get_sentence(self) -> Sentence:
        return self.info.get_sentence()
