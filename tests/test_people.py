"""
Tests for character state and how characters phrase facts.
"""

import pytest

from redherring.domain import Adverb, Noun, Sentence, Verb
from redherring.people import PersonState

from conftest import make_person


@pytest.fixture
def brown():
    return make_person(1, Noun.BROWN, Noun.BUTLER)


@pytest.mark.parametrize(
    "sentence, expected",
    [
        (Sentence(Noun.BROWN, Verb.HAS, Noun.KNIFE), "I have Knife"),
        (Sentence(Noun.BUTLER, Verb.IS, Noun.KILLER, Adverb.FALSE), "I am not Killer"),
        (Sentence(Noun.KILLER, Verb.IS, Noun.BROWN), "Killer is me"),
        (Sentence(Noun.KILLER, Verb.IS, Noun.BUTLER, Adverb.FALSE), "Killer is not me"),
        (Sentence(Noun.RED, Verb.IS, Noun.BROTHER), "Red is Brother"),
        (Sentence(Noun.RED, Verb.IS, Noun.KILLER, Adverb.FALSE), "Red is not Killer"),
    ],
)
def test_speak(brown, sentence, expected):
    assert brown.speak(sentence) == expected


def test_display_name(brown):
    assert brown.display_name == "BROWN"
    assert PersonState(person_id=4).display_name == "PERSON 4"


def test_is_described_by(brown):
    assert brown.is_described_by(Noun.BUTLER)
    assert brown.is_described_by(Noun.BROWN)
    assert not brown.is_described_by(Noun.KILLER)


def test_people_have_separate_knowledge():
    first, second = PersonState(person_id=1), PersonState(person_id=2)
    first.knowledge.add_knowledge(Sentence(Noun.RED, Verb.IS, Noun.BUTLER))
    assert len(second.knowledge) == 0
