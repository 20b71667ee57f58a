"""
Tests for the knowledge store.

Covers:
- Confidence scoring: empty store, direct facts, one-hop chains
- Monotonic confidence as facts are added
- Listen reactions: surprise, derived facts, corroboration, contradiction
- Repeating a fact adds nothing new
"""

import pytest

from redherring.domain import Adverb, Noun, SoundCue, Sentence, Verb
from redherring.knowledge import KnowledgeStore

KILLER_IS_BROTHER = Sentence(Noun.KILLER, Verb.IS, Noun.BROTHER)
BLONDE_IS_BROTHER = Sentence(Noun.BLONDE, Verb.IS, Noun.BROTHER)
BROWN_IS_BUTLER = Sentence(Noun.BROWN, Verb.IS, Noun.BUTLER)
BLONDE_GUILTY = Sentence(Noun.BLONDE, Verb.IS, Noun.KILLER, Adverb.TRUE)
BROWN_INNOCENT = Sentence(Noun.BROWN, Verb.IS, Noun.KILLER, Adverb.FALSE)


@pytest.fixture
def store():
    return KnowledgeStore()


class TestVerifyBelief:
    def test_empty_store_has_no_confidence(self, store):
        for query in (BLONDE_GUILTY, BROWN_INNOCENT, KILLER_IS_BROTHER):
            assert store.verify_belief(query) == 0.0

    def test_direct_fact(self, store):
        store.add_knowledge(KILLER_IS_BROTHER)
        assert store.verify_belief(Sentence(Noun.BROTHER, Verb.IS, Noun.KILLER)) == 1.0

    def test_direct_fact_does_not_support_its_negation(self, store):
        store.add_knowledge(KILLER_IS_BROTHER)
        assert store.verify_belief(KILLER_IS_BROTHER.negated()) == 0.0

    def test_attribute_substitution_supports_guilt(self, store):
        store.extend([KILLER_IS_BROTHER, BLONDE_IS_BROTHER])
        assert store.verify_belief(BLONDE_GUILTY) == 0.5

    def test_different_identity_supports_innocence(self, store):
        store.extend([KILLER_IS_BROTHER, BROWN_IS_BUTLER])
        assert store.verify_belief(BROWN_INNOCENT) == 0.5
        assert store.verify_belief(BROWN_INNOCENT.negated()) == 0.0

    def test_unrelated_fact_gives_no_support(self, store):
        store.add_knowledge(BROWN_IS_BUTLER)
        assert store.verify_belief(BLONDE_GUILTY) == 0.0

    def test_confidence_never_drops_as_facts_arrive(self, store):
        facts = [
            KILLER_IS_BROTHER,
            BROWN_IS_BUTLER,
            Sentence(Noun.RED, Verb.IS, Noun.BUSINESS_PARTNER),
            BLONDE_IS_BROTHER,
            Sentence(Noun.BLONDE, Verb.HAS, Noun.KNIFE),
            BROWN_INNOCENT,
        ]
        queries = [BLONDE_GUILTY, BROWN_INNOCENT, Sentence(Noun.RED, Verb.IS, Noun.KILLER, Adverb.FALSE)]
        previous = {query: store.verify_belief(query) for query in queries}
        for fact in facts:
            store.add_knowledge(fact)
            for query in queries:
                current = store.verify_belief(query)
                assert current >= previous[query]
                previous[query] = current
        assert previous[BROWN_INNOCENT] == 1.5

    def test_duplicates_do_not_inflate_confidence(self, store):
        store.extend([KILLER_IS_BROTHER, BLONDE_IS_BROTHER])
        before = store.verify_belief(BLONDE_GUILTY)
        assert store.add_knowledge(Sentence(Noun.BROTHER, Verb.IS, Noun.BLONDE)) is False
        assert store.verify_belief(BLONDE_GUILTY) == before
        assert len(store) == 2


class TestListen:
    def test_new_fact_with_a_deduction(self, store):
        store.add_knowledge(KILLER_IS_BROTHER)
        lines, sounds = store.listen(None, BLONDE_IS_BROTHER)
        assert lines == ["I didn't know that.", "Then BLONDE must be the killer!"]
        assert sounds == [SoundCue.NONE, SoundCue.DRAMATIC]
        assert store.knows(BLONDE_IS_BROTHER)
        assert BLONDE_GUILTY in store.derived_facts()

    def test_innocence_deduction(self, store):
        store.add_knowledge(KILLER_IS_BROTHER)
        lines, _ = store.listen(None, BROWN_IS_BUTLER)
        assert lines[0] == "I didn't know that."
        assert "So BROWN can't be the killer." in lines

    def test_repeated_fact_only_acknowledges(self, store):
        store.add_knowledge(KILLER_IS_BROTHER)
        store.listen(None, BLONDE_IS_BROTHER)
        facts, derived = store.facts, store.derived_facts()
        lines, sounds = store.listen(None, BLONDE_IS_BROTHER)
        assert lines == ["I already knew that."]
        assert sounds == [SoundCue.NONE]
        assert store.facts == facts
        assert store.derived_facts() == derived

    def test_corroborates_suspicion(self, store):
        store.extend([KILLER_IS_BROTHER, BLONDE_IS_BROTHER])
        lines, sounds = store.listen(None, BLONDE_GUILTY)
        assert lines == ["That fits what I suspected."]
        assert sounds == [SoundCue.HMM]
        assert store.knows(BLONDE_GUILTY)

    def test_contradiction_is_rejected(self, store):
        store.add_knowledge(BROWN_INNOCENT)
        lines, sounds = store.listen(None, BROWN_INNOCENT.negated())
        assert lines == ["That can't be right."]
        assert sounds == [SoundCue.GASP]
        assert not store.knows(BROWN_INNOCENT.negated())

    def test_reactions_are_capped(self):
        store = KnowledgeStore(max_reactions=0)
        store.add_knowledge(KILLER_IS_BROTHER)
        lines, _ = store.listen(None, BLONDE_IS_BROTHER)
        assert lines == ["I didn't know that."]

    def test_same_state_gives_same_reactions(self):
        first, second = KnowledgeStore(), KnowledgeStore()
        for store in (first, second):
            store.extend([KILLER_IS_BROTHER, Sentence(Noun.RED, Verb.IS, Noun.BUTLER)])
        told = Sentence(Noun.BROWN, Verb.IS, Noun.BUSINESS_PARTNER)
        assert first.listen(None, told) == second.listen(None, told)

    def test_remembers_who_said_it(self, store, trio):
        speaker = trio[1]
        store.listen(speaker, BROWN_IS_BUTLER)
        store.listen(speaker, BROWN_IS_BUTLER)
        assert store.sources[BROWN_IS_BUTLER] == [speaker.person_id]


class TestDerivedVerbs:
    def test_owned_item_is_derived_with_has(self, store):
        store.extend([Sentence(Noun.KILLER, Verb.IS, Noun.BUTLER), Sentence(Noun.RED, Verb.HAS, Noun.KNIFE)])
        lines, _ = store.listen(None, Sentence(Noun.RED, Verb.IS, Noun.BUTLER))
        assert lines == ["I didn't know that.", "Then RED must be the killer!", "So Butler has Knife!"]
        assert Sentence(Noun.BUTLER, Verb.HAS, Noun.KNIFE) in store.derived_facts()
        assert Sentence(Noun.BUTLER, Verb.IS, Noun.KNIFE) not in store.derived_facts()

    def test_derived_ownership_corroborates(self, store):
        store.extend(
            [
                Sentence(Noun.KILLER, Verb.IS, Noun.BUTLER),
                Sentence(Noun.RED, Verb.HAS, Noun.KNIFE),
                Sentence(Noun.RED, Verb.IS, Noun.BUTLER),
            ]
        )
        lines, sounds = store.listen(None, Sentence(Noun.KNIFE, Verb.HAS, Noun.BUTLER))
        assert lines[0] == "That fits what I suspected."
        assert sounds[0] is SoundCue.HMM

    def test_guilt_through_an_item_is_stated_with_is(self, store):
        store.extend([Sentence(Noun.KILLER, Verb.HAS, Noun.KNIFE), Sentence(Noun.RED, Verb.HAS, Noun.KNIFE)])
        assert Sentence(Noun.RED, Verb.IS, Noun.KILLER) in store.derived_facts()
