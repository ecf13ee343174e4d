"""Behavioral archetypes and their reference profiles."""

from enum import StrEnum
from types import MappingProxyType
from typing import NamedTuple


class BehaviorArchetype(StrEnum):
    """Fixed set of behavioral clusters, in tie-break order."""

    FAST_LEARNER = "fast-learner"
    METHODICAL = "methodical"
    STRUGGLING = "struggling"
    INCONSISTENT = "inconsistent"


class ArchetypeProfile(NamedTuple):
    """Reference point used for nearest-archetype matching."""

    avg_time: float  # minutes per quiz
    success_rate: float  # fraction of quizzes scoring >= 70
    session_frequency: float  # sessions per day over the last week


ARCHETYPE_PROFILES: MappingProxyType[BehaviorArchetype, ArchetypeProfile] = MappingProxyType({
    BehaviorArchetype.FAST_LEARNER: ArchetypeProfile(15.0, 0.8, 2.5),
    BehaviorArchetype.METHODICAL: ArchetypeProfile(35.0, 0.9, 1.2),
    BehaviorArchetype.STRUGGLING: ArchetypeProfile(25.0, 0.6, 0.8),
    BehaviorArchetype.INCONSISTENT: ArchetypeProfile(20.0, 0.7, 1.8),
})
