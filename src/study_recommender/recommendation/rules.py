"""Archetype-specific confidence adjustments.

Each archetype has exactly one rule: a predicate over the technique and the
multipliers applied when it holds or not.
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import NamedTuple

from study_recommender.models.archetype import BehaviorArchetype
from study_recommender.models.technique import Difficulty, StudyTechnique

SHORT_SESSION_MINUTES = 30


class AdjustmentRule(NamedTuple):
    description: str
    applies: Callable[[StudyTechnique], bool]
    boost: float
    otherwise: float

    def multiplier(self, technique: StudyTechnique) -> float:
        return self.boost if self.applies(technique) else self.otherwise


ADJUSTMENT_RULES: MappingProxyType[BehaviorArchetype, AdjustmentRule] = MappingProxyType({
    BehaviorArchetype.FAST_LEARNER: AdjustmentRule(
        "advanced techniques",
        lambda t: t.difficulty is Difficulty.ADVANCED,
        1.2,
        1.0,
    ),
    BehaviorArchetype.METHODICAL: AdjustmentRule(
        "intermediate techniques",
        lambda t: t.difficulty is Difficulty.INTERMEDIATE,
        1.1,
        0.9,
    ),
    BehaviorArchetype.STRUGGLING: AdjustmentRule(
        "beginner techniques",
        lambda t: t.difficulty is Difficulty.BEGINNER,
        1.2,
        0.7,
    ),
    BehaviorArchetype.INCONSISTENT: AdjustmentRule(
        f"techniques under {SHORT_SESSION_MINUTES} minutes",
        lambda t: t.estimated_time < SHORT_SESSION_MINUTES,
        1.1,
        0.8,
    ),
})


def archetype_multiplier(archetype: BehaviorArchetype, technique: StudyTechnique) -> float:
    """Confidence multiplier for a technique given the learner's archetype."""
    rule = ADJUSTMENT_RULES.get(archetype)
    if rule is None:
        return 1.0
    return rule.multiplier(technique)
