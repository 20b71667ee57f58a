"""Mystery instances and a small seeded generator for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from redherring.clues.generators import make_clue
from redherring.clues.models import ClueInfo, ClueItem
from redherring.domain.enums import HAIR_COLORS, IDENTITIES, Noun, NounType, Verb
from redherring.knowledge.store import DEFAULT_MAX_REACTIONS, KnowledgeStore
from redherring.people import PersonState
from redherring.util.rng import Rng

HEAD_SPRITES = {
    Noun.BLONDE: "HeadBlonde",
    Noun.BROWN: "HeadBrown",
    Noun.RED: "HeadRed",
}


@dataclass
class MysteryInstance:
    people: list[PersonState]
    starting_clue: ClueInfo
    clues: list[ClueItem] = field(default_factory=list)
    killer_id: int | None = None

    @property
    def killer(self) -> PersonState | None:
        for person in self.people:
            if person.person_id == self.killer_id:
                return person
        return None


class MysteryGenerator(Protocol):
    def __call__(
        self,
        rng: Rng,
        player_id: int = 0,
        max_reactions: int = DEFAULT_MAX_REACTIONS,
    ) -> MysteryInstance: ...


def generate_mystery(
    rng: Rng,
    player_id: int = 0,
    max_reactions: int = DEFAULT_MAX_REACTIONS,
) -> MysteryInstance:
    hairs = list(HAIR_COLORS)
    identities = list(IDENTITIES)
    rng.shuffle(hairs)
    rng.shuffle(identities)

    people = [
        PersonState(
            person_id=index,
            is_player=index == player_id,
            head_sprite=HEAD_SPRITES[hair],
            attributes={NounType.HAIR_COLOR: hair, NounType.IDENTITY: identity},
            knowledge=KnowledgeStore(max_reactions=max_reactions),
        )
        for index, (hair, identity) in enumerate(zip(hairs, identities))
    ]
    killer = rng.choice(people)
    killer_identity = killer.attributes[NounType.IDENTITY]
    starting_clue = ClueInfo(concept_a=Noun.KILLER, concept_b=killer_identity, verb=Verb.IS)

    pairs = [
        (person.attributes[NounType.HAIR_COLOR], person.attributes[NounType.IDENTITY])
        for person in people
    ]
    pairs.append((killer.attributes[NounType.HAIR_COLOR], Noun.KNIFE))
    clues = [clue for clue in (make_clue(a, b) for a, b in pairs) if clue is not None]
    rng.shuffle(clues)
    return MysteryInstance(
        people=people,
        starting_clue=starting_clue,
        clues=clues,
        killer_id=killer.person_id,
    )
