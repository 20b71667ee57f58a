"""Symmetric subject-verb-object facts.

Examples::

    Sentence(Noun.BLONDE, Verb.IS, Noun.BROTHER, Adverb.TRUE)   # Blonde is Brother
    Sentence(Noun.BROWN, Verb.HAS, Noun.KNIFE, Adverb.TRUE)     # Brown has Knife
    Sentence(Noun.RED, Verb.IS, Noun.KILLER, Adverb.FALSE)      # Red is not Killer

"A is B" and "B is A" are the same fact, so equality and hashing both work
on the unordered noun pair.
"""

from __future__ import annotations

from dataclasses import dataclass

from redherring.domain.enums import Adverb, Noun, Verb
from redherring.domain.rules import InvalidSentence, ensure_member


@dataclass(frozen=True, eq=False)
class Sentence:
    subject: Noun
    verb: Verb
    direct_object: Noun
    adverb: Adverb = Adverb.TRUE

    def __post_init__(self) -> None:
        ensure_member(self.subject, Noun, "subject")
        ensure_member(self.verb, Verb, "verb")
        ensure_member(self.direct_object, Noun, "direct object")
        ensure_member(self.adverb, Adverb, "adverb")
        if self.subject is self.direct_object:
            raise InvalidSentence(f"a sentence cannot relate {self.subject} to itself")

    def key(self) -> tuple[frozenset[Noun], Verb, Adverb]:
        return frozenset((self.subject, self.direct_object)), self.verb, self.adverb

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sentence):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    @property
    def nouns(self) -> frozenset[Noun]:
        return frozenset((self.subject, self.direct_object))

    def involves(self, noun: Noun) -> bool:
        return noun is self.subject or noun is self.direct_object

    def other(self, noun: Noun) -> Noun:
        if noun is self.subject:
            return self.direct_object
        if noun is self.direct_object:
            return self.subject
        raise KeyError(f"{noun} is not part of '{self}'")

    def negated(self) -> "Sentence":
        return Sentence(self.subject, self.verb, self.direct_object, self.adverb.flipped())

    def describe(self) -> str:
        """Render with the polarity spelled out."""
        if self.adverb is Adverb.TRUE:
            return str(self)
        return f"{self.subject} {self.verb.lower()} not {self.direct_object}"

    def __str__(self) -> str:
        return " ".join((str(self.subject), self.verb.lower(), str(self.direct_object)))
