"""Per-character knowledge: believed facts, derived facts and reactions."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Iterable, Iterator

import networkx as nx

from redherring.domain.enums import HAIR_COLORS, Adverb, Noun, SoundCue
from redherring.domain.sentence import Sentence
from redherring.knowledge.scoring import (
    AttributeSubstitutionScorer,
    BeliefScorer,
    sentence_order,
)

if TYPE_CHECKING:
    from redherring.people import PersonState

logger = logging.getLogger(__name__)

DEFAULT_MAX_REACTIONS = 2

ALREADY_KNOWN = "I already knew that."
CONTRADICTION = "That can't be right."
CORROBORATION = "That fits what I suspected."
SURPRISE = "I didn't know that."


@dataclass(frozen=True)
class Reaction:
    text: str
    sound: SoundCue = SoundCue.NONE


def _reaction_priority(sentence: Sentence) -> tuple[int, tuple[int, int, int]]:
    return (0 if sentence.involves(Noun.KILLER) else 1), sentence_order(sentence)


def _derived_reaction(sentence: Sentence) -> Reaction:
    if sentence.involves(Noun.KILLER):
        suspect = sentence.other(Noun.KILLER)
        if suspect in HAIR_COLORS:
            name = suspect.upper()
            if sentence.adverb is Adverb.TRUE:
                return Reaction(f"Then {name} must be the killer!", SoundCue.DRAMATIC)
            return Reaction(f"So {name} can't be the killer.", SoundCue.DRAMATIC)
    return Reaction(f"So {sentence.describe()}!", SoundCue.AHA)


class KnowledgeStore:
    def __init__(
        self,
        scorer: BeliefScorer | None = None,
        max_reactions: int = DEFAULT_MAX_REACTIONS,
    ) -> None:
        self.scorer = scorer or AttributeSubstitutionScorer()
        self.max_reactions = max_reactions
        self.graph = nx.MultiGraph()
        self.sources: dict[Sentence, list[int]] = {}
        self._facts: set[Sentence] = set()
        self._derived: set[Sentence] | None = None

    def __len__(self) -> int:
        return len(self._facts)

    def __contains__(self, sentence: object) -> bool:
        return sentence in self._facts

    def __iter__(self) -> Iterator[Sentence]:
        return iter(sorted(self._facts, key=sentence_order))

    @property
    def facts(self) -> frozenset[Sentence]:
        return frozenset(self._facts)

    def knows(self, sentence: Sentence) -> bool:
        return sentence in self._facts

    def add_knowledge(self, sentence: Sentence) -> bool:
        if sentence in self._facts:
            return False
        self._facts.add(sentence)
        self.graph.add_edge(
            sentence.subject,
            sentence.direct_object,
            key=(sentence.verb, sentence.adverb),
            sentence=sentence,
        )
        self._derived = None
        return True

    def extend(self, sentences: Iterable[Sentence]) -> None:
        for sentence in sentences:
            self.add_knowledge(sentence)

    def derived_facts(self) -> frozenset[Sentence]:
        if self._derived is None:
            self._derived = self.scorer.derive(self.graph)
        return frozenset(self._derived)

    def verify_belief(self, query: Sentence) -> float:
        if not self._facts:
            return 0.0
        return max(0.0, float(self.scorer.score(self.graph, query)))

    def react(self, speaker: PersonState | None, sentence: Sentence) -> list[Reaction]:
        """Integrate a told fact and return the lines this character says back."""
        if speaker is not None:
            self.sources.setdefault(sentence, [])
            if speaker.person_id not in self.sources[sentence]:
                self.sources[sentence].append(speaker.person_id)

        if sentence in self._facts:
            return [Reaction(ALREADY_KNOWN)]
        if sentence.negated() in self._facts:
            logger.debug("Rejected '%s': contradicts what is already believed", sentence.describe())
            return [Reaction(CONTRADICTION, SoundCue.GASP)]

        before = self.derived_facts()
        if sentence in before:
            reactions = [Reaction(CORROBORATION, SoundCue.HMM)]
        else:
            reactions = [Reaction(SURPRISE)]
        self.add_knowledge(sentence)

        fresh = [
            derived
            for derived in self.derived_facts()
            if derived not in before and derived not in self._facts
        ]
        fresh.sort(key=_reaction_priority)
        reactions.extend(_derived_reaction(derived) for derived in fresh[: self.max_reactions])
        return reactions

    def listen(
        self, speaker: PersonState | None, sentence: Sentence
    ) -> tuple[list[str], list[SoundCue]]:
        reactions = self.react(speaker, sentence)
        return [reaction.text for reaction in reactions], [reaction.sound for reaction in reactions]
