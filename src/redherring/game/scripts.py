"""Scripted conversations for each stage of the evening."""

from __future__ import annotations

from typing import Callable, Sequence

from redherring.clues.models import ClueInfo
from redherring.dialogue.block import DialogBlock
from redherring.domain.enums import HAIR_COLORS, Adverb, GameStage, Noun, Verb
from redherring.domain.sentence import Sentence
from redherring.people import PersonState

NO_IDEA = "I have no idea."


def guilty(suspect: Noun) -> Sentence:
    return Sentence(suspect, Verb.IS, Noun.KILLER, Adverb.TRUE)


def innocent(suspect: Noun) -> Sentence:
    return Sentence(suspect, Verb.IS, Noun.KILLER, Adverb.FALSE)


def _non_players(people: Sequence[PersonState]) -> list[PersonState]:
    return [person for person in people if not person.is_player]


def _heads(people: Sequence[PersonState]) -> list[str]:
    return [person.head_sprite for person in _non_players(people)]


def intro_script(block: DialogBlock, people: Sequence[PersonState], starting_clue: ClueInfo) -> None:
    player = next(person for person in people if person.is_player)
    first, last = _non_players(people)[0], _non_players(people)[-1]
    block.queue_dialogue(last, [last.head_sprite], "What happened?")
    block.queue_dialogue(first, [first.head_sprite], "Where am I?")
    block.queue_dialogue(player, _heads(people), "Who am I?")
    block.queue_dialogue(last, ["Victim"], "Look! A body!")
    block.queue_dialogue(first, ["CrimeScene"], f"And a name: {starting_clue.concept_b}")
    block.queue_dialogue(player, _heads(people), "Let's split up and look for clues.")


def communal_script(block: DialogBlock, people: Sequence[PersonState], stage: GameStage) -> None:
    player = next(person for person in people if person.is_player)
    first, last = _non_players(people)[0], _non_players(people)[-1]
    if stage is GameStage.COMMUNAL_3:
        block.queue_dialogue(
            first,
            _heads(people),
            "The police are almost here. Let's do a final round of information exchange.",
        )
        block.queue_information_exchange()
        block.queue_dialogue(last, _heads(people), "Well, the police are here now.")
        return
    block.queue_exchange_request(
        first,
        _heads(people),
        question="What did everyone find? Shall we compare notes?",
        refusal="Fine, keep it to yourself then.",
    )
    block.queue_dialogue(player, _heads(people), "There must be more clues around.")


# Which of the other two suspects each character weighs first. On a tie in
# innocence the second one is cleared.
ELIMINATION_ORDER: dict[Noun, tuple[Noun, Noun]] = {
    Noun.BLONDE: (Noun.BROWN, Noun.RED),
    Noun.BROWN: (Noun.BLONDE, Noun.RED),
    Noun.RED: (Noun.BROWN, Noun.BLONDE),
}


def accusation_line(person: PersonState, suspects: Sequence[Noun] = HAIR_COLORS) -> str:
    """What a character says when the police ask who did it.

    A direct accusation wins, checked in suspect order. Otherwise the
    character clears themselves and whichever of the other two they are
    more sure is innocent. Ties are broken by ``ELIMINATION_ORDER``.
    """
    knowledge = person.knowledge
    own_hair = person.hair
    for suspect in suspects:
        if suspect is own_hair:
            continue
        confidence = knowledge.verify_belief(guilty(suspect))
        if confidence > 0:
            return f"I think {suspect.upper()} did it (confidence {confidence:g})"

    others = [suspect for suspect in suspects if suspect is not own_hair]
    if len(others) != 2:
        return NO_IDEA
    first, second = ELIMINATION_ORDER.get(own_hair, tuple(others))
    if {first, second} != set(others):
        first, second = others
    first_innocence = knowledge.verify_belief(innocent(first))
    second_innocence = knowledge.verify_belief(innocent(second))
    if first_innocence <= 0 and second_innocence <= 0:
        return NO_IDEA
    if first_innocence > second_innocence:
        cleared, accused = first, second
    else:
        cleared, accused = second, first
    return f"Well I didn't do it, and {cleared.upper()} didn't do it, so {accused.upper()} did."


def police_script(
    block: DialogBlock,
    people: Sequence[PersonState],
    on_player_accusation: Callable[[Sentence], None],
) -> None:
    block.queue_dialogue(None, ["Police"], "What happened? Which one of you killed the guy?")
    block.queue_custom_sentence(
        _heads(people),
        on_player_accusation,
        subjects=list(HAIR_COLORS),
        objects=[Noun.KILLER],
    )
    for person in _non_players(people):
        block.queue_dialogue(person, [person.head_sprite], accusation_line(person))


def reveal_script(
    block: DialogBlock,
    killer: PersonState | None,
    player_accusation: Sentence | None,
) -> None:
    if killer is None or killer.hair is None:
        block.queue_dialogue(None, ["Police"], "The police never found out who did it.")
        return
    block.queue_dialogue(None, ["Police"], f"The killer was {killer.hair.upper()}.")
    if player_accusation is None:
        return
    if player_accusation == guilty(killer.hair):
        block.queue_dialogue(None, ["Police"], "You were right.")
    else:
        block.queue_dialogue(
            None, ["Police"], f"You said {player_accusation.describe()}. You were wrong."
        )
