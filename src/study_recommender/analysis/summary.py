"""Learner progress summary for dashboards."""

from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from study_recommender.analysis.behavior import BehaviorClusterer
from study_recommender.analysis.performance import PerformanceAnalyzer
from study_recommender.models.archetype import BehaviorArchetype
from study_recommender.models.history import QuizResult, StudySession
from study_recommender.models.learner import LearningStyleVector
from study_recommender.models.recommendation import PerformanceSignal

RECENT_QUIZ_COUNT = 5


class LearnerSummary(BaseModel):
    """Aggregate view of a learner's history."""

    model_config = ConfigDict(frozen=True)

    quiz_count: int
    session_count: int
    average_score: int  # rounded percent, 0 without quizzes
    total_study_seconds: int
    total_study_hours: int  # rounded
    average_rating: float  # one decimal, 0.0 without sessions
    recent_quizzes: tuple[QuizResult, ...]
    style_breakdown: dict[str, int] | None = None
    performance: PerformanceSignal
    archetype: BehaviorArchetype


def summarize(
    quiz_results: Sequence[QuizResult],
    sessions: Sequence[StudySession],
    style: LearningStyleVector | None = None,
    now: datetime | None = None,
    clusterer: BehaviorClusterer | None = None,
    analyzer: PerformanceAnalyzer | None = None,
) -> LearnerSummary:
    """Summarize quiz and study history.

    Args:
        quiz_results: Quiz history in completion order.
        sessions: Study session history in completion order.
        style: Learner's style vector, if assessed.
        now: Reference time for session frequency.
        clusterer: Behavior clusterer override.
        analyzer: Performance analyzer override.

    Returns:
        LearnerSummary.
    """
    clusterer = clusterer or BehaviorClusterer()
    analyzer = analyzer or PerformanceAnalyzer()

    average_score = (
        round(sum(q.score for q in quiz_results) / len(quiz_results)) if quiz_results else 0
    )
    total_seconds = sum(s.duration for s in sessions)
    average_rating = (
        round(sum(s.rating for s in sessions) / len(sessions), 1) if sessions else 0.0
    )

    return LearnerSummary(
        quiz_count=len(quiz_results),
        session_count=len(sessions),
        average_score=average_score,
        total_study_seconds=total_seconds,
        total_study_hours=round(total_seconds / 3600),
        average_rating=average_rating,
        recent_quizzes=tuple(quiz_results[-RECENT_QUIZ_COUNT:]),
        style_breakdown=style.as_percentages() if style is not None else None,
        performance=analyzer.analyze(quiz_results),
        archetype=clusterer.cluster(quiz_results, sessions, now),
    )
