"""Confidence scoring over a character's fact graph.

The graph holds one node per noun and one edge per believed sentence. Scores
add up independent lines of support, so learning a new fact can only keep a
score where it is or raise it.
"""

from __future__ import annotations

from itertools import combinations
from typing import Protocol

import networkx as nx

from redherring.domain.enums import Adverb, Noun, NounType, Verb
from redherring.domain.sentence import Sentence

DIRECT_SUPPORT = 1.0
CHAIN_SUPPORT = 0.5

# Each character has exactly one value of these, so two different values
# of the same type rule each other out.
EXCLUSIVE_TYPES = (NounType.HAIR_COLOR, NounType.IDENTITY)

_NOUN_ORDER = {noun: index for index, noun in enumerate(Noun)}


def noun_order(noun: Noun) -> int:
    return _NOUN_ORDER[noun]


def sentence_order(sentence: Sentence) -> tuple[int, int, int]:
    low, high = sorted((noun_order(sentence.subject), noun_order(sentence.direct_object)))
    return low, high, 0 if sentence.adverb is Adverb.TRUE else 1


def linked(graph: nx.MultiGraph, noun: Noun, adverb: Adverb) -> list[Noun]:
    """Nouns joined to ``noun`` by at least one fact of the given polarity."""
    if noun not in graph:
        return []
    found = {
        other
        for _, other, data in graph.edges(noun, data=True)
        if data["sentence"].adverb is adverb
    }
    return sorted(found, key=noun_order)


def has_link(graph: nx.MultiGraph, a: Noun, b: Noun, adverb: Adverb) -> bool:
    if not graph.has_edge(a, b):
        return False
    return any(data["sentence"].adverb is adverb for data in graph[a][b].values())


def link_verbs(graph: nx.MultiGraph, a: Noun, b: Noun) -> set[Verb]:
    if not graph.has_edge(a, b):
        return set()
    return {data["sentence"].verb for data in graph[a][b].values()}


# A chain is the list of known links that together imply a fact.
Chain = tuple[tuple[Noun, Noun], ...]


class BeliefScorer(Protocol):
    def score(self, graph: nx.MultiGraph, query: Sentence) -> float: ...

    def derive(self, graph: nx.MultiGraph) -> set[Sentence]: ...


class AttributeSubstitutionScorer:
    """Direct matches plus one level of attribute substitution."""

    def score(self, graph: nx.MultiGraph, query: Sentence) -> float:
        a, b = query.subject, query.direct_object
        total = 0.0
        if has_link(graph, a, b, query.adverb):
            total += DIRECT_SUPPORT
        return total + CHAIN_SUPPORT * len(self._chains(graph, a, b, query.adverb))

    def derive(self, graph: nx.MultiGraph) -> set[Sentence]:
        derived: set[Sentence] = set()
        nouns = sorted(graph.nodes, key=noun_order)
        for a, b in combinations(nouns, 2):
            if a.type == b.type:
                continue
            for adverb in (Adverb.TRUE, Adverb.FALSE):
                if has_link(graph, a, b, adverb):
                    continue
                chains = self._chains(graph, a, b, adverb)
                if chains:
                    derived.add(Sentence(a, self._derived_verb(graph, a, b, chains), b, adverb))
        return derived

    def _derived_verb(self, graph: nx.MultiGraph, a: Noun, b: Noun, chains: list[Chain]) -> Verb:
        # Being the killer is always "is", whatever links led there.
        if Noun.KILLER in (a, b) and {a.type, b.type} & set(EXCLUSIVE_TYPES):
            return Verb.IS
        # Red has Knife, Red is Butler => Butler has Knife
        for chain in chains:
            for x, y in chain:
                if Verb.HAS in link_verbs(graph, x, y):
                    return Verb.HAS
        return Verb.IS

    def _chains(self, graph: nx.MultiGraph, a: Noun, b: Noun, adverb: Adverb) -> list[Chain]:
        if adverb is Adverb.TRUE:
            return [
                ((a, bridge), (bridge, b))
                for bridge in linked(graph, a, Adverb.TRUE)
                if bridge is not b and has_link(graph, bridge, b, Adverb.TRUE)
            ]
        chains: list[Chain] = []
        for start, end in ((a, b), (b, a)):
            for bridge in linked(graph, start, Adverb.TRUE):
                if bridge is end:
                    continue
                # A is C, and C is not B
                if has_link(graph, bridge, end, Adverb.FALSE):
                    chains.append(((start, bridge), (bridge, end)))
                # A is C, and C is another value of B's attribute
                elif bridge.type == end.type and bridge.type in EXCLUSIVE_TYPES:
                    chains.append(((start, bridge),))
        # A is C, B is D, and C and D are different values of one attribute
        for c in linked(graph, a, Adverb.TRUE):
            if c.type not in EXCLUSIVE_TYPES or c.type in (a.type, b.type) or c is b:
                continue
            for d in linked(graph, b, Adverb.TRUE):
                if d is not c and d is not a and d.type == c.type:
                    chains.append(((a, c), (b, d)))
        return chains
