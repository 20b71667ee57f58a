"""Belief tracking and confidence scoring."""

from redherring.knowledge.scoring import AttributeSubstitutionScorer, BeliefScorer
from redherring.knowledge.store import KnowledgeStore, Reaction

__all__ = [
    "AttributeSubstitutionScorer",
    "BeliefScorer",
    "KnowledgeStore",
    "Reaction",
]
