"""Clue generators turn a pair of typed nouns into a physical clue.

Each generator handles exactly one pair of noun types. The mystery generator
scans ``CLUE_GENERATORS`` in order and uses the first one that matches, so a
new kind of clue is a new class appended to the registry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from redherring.clues.models import ClueItem
from redherring.domain.enums import Noun, NounType, Verb
from redherring.domain.rules import InvalidClue


class ClueGenerator(ABC):
    attribute_type: NounType
    subject_type: NounType
    sprite_name: str = "None"
    verb: Verb = Verb.IS

    def match_types(self, t1: NounType, t2: NounType) -> bool:
        return {t1, t2} == {self.attribute_type, self.subject_type}

    def _ordered(self, n1: Noun, n2: Noun) -> tuple[Noun, Noun]:
        if not self.match_types(n1.type, n2.type):
            raise InvalidClue(f"{type(self).__name__} cannot relate {n1} and {n2}")
        if n1.type == self.attribute_type:
            return n1, n2
        return n2, n1

    def get_item(self, n1: Noun, n2: Noun) -> ClueItem:
        attribute, subject = self._ordered(n1, n2)
        return ClueItem.build(
            attribute,
            subject,
            self.sprite_name,
            self.describe(attribute, subject),
            verb=self.verb,
        )

    @abstractmethod
    def describe(self, attribute: Noun, subject: Noun) -> str:
        raise NotImplementedError


class AppearanceIdentityClue(ClueGenerator):
    attribute_type = NounType.HAIR_COLOR
    subject_type = NounType.IDENTITY
    sprite_name = "Photo"

    def describe(self, attribute: Noun, subject: Noun) -> str:
        return f"A photo of the victim and his {subject}, who has {attribute} hair,"


class IdentityItemClue(ClueGenerator):
    attribute_type = NounType.IDENTITY
    subject_type = NounType.UNIQUE
    sprite_name = "Letter"
    verb = Verb.HAS

    def describe(self, attribute: Noun, subject: Noun) -> str:
        return f"A letter from the victim's {attribute} mentioning the {subject},"


class AppearanceItemClue(ClueGenerator):
    attribute_type = NounType.HAIR_COLOR
    subject_type = NounType.UNIQUE
    sprite_name = "Strand"
    verb = Verb.HAS

    def describe(self, attribute: Noun, subject: Noun) -> str:
        return f"A {attribute.lower()} hair caught on the {subject},"


CLUE_GENERATORS: tuple[ClueGenerator, ...] = (
    AppearanceIdentityClue(),
    IdentityItemClue(),
    AppearanceItemClue(),
)


def find_generator(n1: Noun, n2: Noun) -> ClueGenerator | None:
    for generator in CLUE_GENERATORS:
        if generator.match_types(n1.type, n2.type):
            return generator
    return None


def make_clue(n1: Noun, n2: Noun) -> ClueItem | None:
    generator = find_generator(n1, n2)
    if generator is None:
        return None
    return generator.get_item(n1, n2)
