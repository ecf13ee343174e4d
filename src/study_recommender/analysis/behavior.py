"""Nearest-archetype clustering of learner behavior."""

from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import NamedTuple

import numpy as np
import structlog

from study_recommender.models.archetype import (
    ARCHETYPE_PROFILES,
    ArchetypeProfile,
    BehaviorArchetype,
)
from study_recommender.models.history import QuizResult, StudySession

logger = structlog.get_logger()

DEFAULT_AVG_TIME = 20.0
DEFAULT_SUCCESS_RATE = 0.7
DEFAULT_SESSION_FREQUENCY = 1.0
FREQUENCY_WINDOW_DAYS = 7
# Success rate is a fraction while the other features are minutes and
# sessions/day; scaling it by 100 puts it on a comparable magnitude.
SUCCESS_RATE_SCALE = 100.0


class BehaviorFeatures(NamedTuple):
    avg_time: float
    success_rate: float
    session_frequency: float


def _naive(moment: datetime) -> datetime:
    """Convert aware datetimes to naive local time so they compare with datetime.now()."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


class BehaviorClusterer:
    """Assigns a learner to the closest behavioral archetype.

    Args:
        profiles: Reference profile per archetype. Iteration order is the
            tie-break order.
    """

    def __init__(
        self,
        profiles: dict[BehaviorArchetype, ArchetypeProfile] | None = None,
    ):
        self.profiles = dict(profiles if profiles is not None else ARCHETYPE_PROFILES)
        if not self.profiles:
            raise ValueError("At least one archetype profile is required")

    def profile_features(
        self,
        quiz_results: Sequence[QuizResult],
        sessions: Sequence[StudySession],
        now: datetime | None = None,
    ) -> BehaviorFeatures:
        """Summarize history as (avg_time, success_rate, session_frequency).

        Args:
            quiz_results: Quiz history.
            sessions: Study session history.
            now: Reference time for the trailing window. Defaults to the wall clock.

        Returns:
            Feature triple, with defaults substituted for empty histories.
        """
        if quiz_results:
            avg_time = float(np.mean([q.time_spent for q in quiz_results]))
            success_rate = sum(1 for q in quiz_results if q.passed) / len(quiz_results)
        else:
            avg_time = DEFAULT_AVG_TIME
            success_rate = DEFAULT_SUCCESS_RATE

        if sessions:
            reference = _naive(now) if now is not None else datetime.now()
            window_start = reference - timedelta(days=FREQUENCY_WINDOW_DAYS)
            recent = sum(1 for s in sessions if _naive(s.completed_at) > window_start)
            session_frequency = recent / FREQUENCY_WINDOW_DAYS
        else:
            session_frequency = DEFAULT_SESSION_FREQUENCY

        return BehaviorFeatures(avg_time, success_rate, session_frequency)

    @staticmethod
    def distance(features: BehaviorFeatures, profile: ArchetypeProfile) -> float:
        """Euclidean distance with the success-rate axis scaled by 100."""
        delta = np.array([
            features.avg_time - profile.avg_time,
            (features.success_rate - profile.success_rate) * SUCCESS_RATE_SCALE,
            features.session_frequency - profile.session_frequency,
        ])
        return float(np.sqrt(np.sum(delta ** 2)))

    def cluster(
        self,
        quiz_results: Sequence[QuizResult],
        sessions: Sequence[StudySession],
        now: datetime | None = None,
    ) -> BehaviorArchetype:
        """Return the archetype nearest to the learner's history.

        Ties resolve to the earliest archetype in profile order.
        """
        features = self.profile_features(quiz_results, sessions, now)

        closest = next(iter(self.profiles))
        min_distance = float("inf")
        for archetype, profile in self.profiles.items():
            distance = self.distance(features, profile)
            if distance < min_distance:
                min_distance = distance
                closest = archetype

        logger.debug(
            "archetype_assigned",
            archetype=closest.value,
            distance=round(min_distance, 3),
            avg_time=features.avg_time,
            success_rate=features.success_rate,
            session_frequency=features.session_frequency,
        )
        return closest
