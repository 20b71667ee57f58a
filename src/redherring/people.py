"""Characters taking part in the mystery."""

from __future__ import annotations

from dataclasses import dataclass, field

from redherring.domain.enums import Adverb, Noun, NounType, Verb
from redherring.domain.sentence import Sentence
from redherring.knowledge.store import KnowledgeStore

_FIRST_PERSON = {Verb.IS: "am", Verb.HAS: "have"}


@dataclass(eq=False)
class PersonState:
    person_id: int
    is_player: bool = False
    head_sprite: str = "None"
    attributes: dict[NounType, Noun] = field(default_factory=dict)
    knowledge: KnowledgeStore = field(default_factory=KnowledgeStore)

    @property
    def hair(self) -> Noun | None:
        return self.attributes.get(NounType.HAIR_COLOR)

    @property
    def display_name(self) -> str:
        if self.hair is None:
            return f"PERSON {self.person_id}"
        return self.hair.upper()

    def is_described_by(self, noun: Noun) -> bool:
        return noun in self.attributes.values()

    def speak(self, sentence: Sentence) -> str:
        """Phrase a sentence the way this person would say it."""
        negation = " not" if sentence.adverb is Adverb.FALSE else ""
        if self.is_described_by(sentence.subject):
            verb = _FIRST_PERSON[sentence.verb]
            return f"I {verb}{negation} {sentence.direct_object}"
        if self.is_described_by(sentence.direct_object):
            verb = sentence.verb.lower()
            return f"{sentence.subject} {verb}{negation} me"
        return sentence.describe()

    def __repr__(self) -> str:
        role = "player" if self.is_player else "npc"
        return f"PersonState({self.person_id}, {role}, {self.display_name})"
