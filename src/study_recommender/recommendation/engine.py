"""Recommendation engine combining style, behavior and performance signals."""

from collections.abc import Sequence
from datetime import datetime

import structlog

from study_recommender.analysis.behavior import BehaviorClusterer
from study_recommender.analysis.performance import PerformanceAnalyzer
from study_recommender.config import load_technique_catalog
from study_recommender.models.archetype import BehaviorArchetype
from study_recommender.models.history import QuizResult, StudySession
from study_recommender.models.learner import LearningStyleVector, StyleDimension
from study_recommender.models.recommendation import (
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
    PerformanceSignal,
    Recommendation,
    RecommendationReport,
)
from study_recommender.models.technique import StudyTechnique, TechniqueCatalog, TechniqueType
from study_recommender.recommendation import templates
from study_recommender.recommendation.rules import archetype_multiplier

logger = structlog.get_logger()

DEFAULT_LIMIT = 5
HIGH_EFFECTIVENESS = 0.8
TREND_WEIGHT = 0.2
CONSISTENCY_FLOOR = 0.8
CONSISTENCY_WEIGHT = 0.4
MAX_REASONS = 2
MAX_STYLE_TIPS = 2
MAX_TIPS = 3


class RecommendationEngine:
    """Ranks catalog techniques for a learner and explains each pick.

    Archetype and performance signals are computed once per call and shared
    by every technique. The engine keeps no per-call state, so one instance
    can serve concurrent callers.

    Args:
        catalog: Technique catalog. Defaults to the bundled catalog.
        clusterer: Behavior clusterer.
        analyzer: Performance analyzer.
    """

    def __init__(
        self,
        catalog: TechniqueCatalog | None = None,
        clusterer: BehaviorClusterer | None = None,
        analyzer: PerformanceAnalyzer | None = None,
    ):
        self.catalog = catalog if catalog is not None else load_technique_catalog()
        self.clusterer = clusterer or BehaviorClusterer()
        self.analyzer = analyzer or PerformanceAnalyzer()

    def generate(
        self,
        style: LearningStyleVector,
        quiz_results: Sequence[QuizResult] = (),
        sessions: Sequence[StudySession] = (),
        limit: int = DEFAULT_LIMIT,
        now: datetime | None = None,
    ) -> list[Recommendation]:
        """Generate ranked recommendations.

        Args:
            style: Learner's style vector.
            quiz_results: Quiz history in completion order.
            sessions: Study session history in completion order.
            limit: Maximum number of recommendations.
            now: Reference time for session frequency. Defaults to the wall clock.

        Returns:
            Recommendations sorted by descending confidence, catalog order on ties.
        """
        return list(self.report(style, quiz_results, sessions, limit, now).recommendations)

    def report(
        self,
        style: LearningStyleVector,
        quiz_results: Sequence[QuizResult] = (),
        sessions: Sequence[StudySession] = (),
        limit: int = DEFAULT_LIMIT,
        now: datetime | None = None,
    ) -> RecommendationReport:
        """Like generate(), but also returns the archetype and performance signal."""
        archetype = self.clusterer.cluster(quiz_results, sessions, now)
        performance = self.analyzer.analyze(quiz_results)
        dominant = style.dominant_style()

        scored = [
            Recommendation(
                id=f"rec-{technique.id}",
                technique=technique,
                confidence=self.confidence(technique, style, archetype, performance),
                reasoning=self.reasoning(technique, dominant, archetype),
                personalized_tips=self.personalized_tips(dominant, archetype),
            )
            for technique in self.catalog
        ]
        # sorted() is stable, so equal confidences keep catalog order
        ranked = sorted(scored, key=lambda r: r.confidence, reverse=True)[: max(limit, 0)]

        logger.debug(
            "recommendations_generated",
            archetype=archetype.value,
            dominant_style=dominant.value,
            trend=performance.trend,
            consistency=performance.consistency,
            count=len(ranked),
        )
        return RecommendationReport(
            archetype=archetype,
            performance=performance,
            dominant_style=dominant,
            recommendations=tuple(ranked),
        )

    @staticmethod
    def confidence(
        technique: StudyTechnique,
        style: LearningStyleVector,
        archetype: BehaviorArchetype,
        performance: PerformanceSignal,
    ) -> float:
        """Score how well a technique fits the learner, clamped to [0.1, 0.95]."""
        confidence = style.weight_for(technique.type)
        confidence *= technique.effectiveness
        confidence *= archetype_multiplier(archetype, technique)
        confidence *= 1 + performance.trend * TREND_WEIGHT
        confidence *= CONSISTENCY_FLOOR + performance.consistency * CONSISTENCY_WEIGHT
        return min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, confidence))

    @staticmethod
    def reasoning(
        technique: StudyTechnique,
        dominant: StyleDimension,
        archetype: BehaviorArchetype,
    ) -> str:
        """Short explanation built from at most two reason clauses."""
        reasons = []
        if technique.type in (dominant.technique_type, TechniqueType.MIXED):
            reasons.append(templates.STYLE_MATCH_REASON.format(style=dominant.label.lower()))
        if archetype in templates.ARCHETYPE_REASONS:
            reasons.append(templates.ARCHETYPE_REASONS[archetype])
        if technique.effectiveness > HIGH_EFFECTIVENESS:
            reasons.append(templates.HIGH_EFFECTIVENESS_REASON)
        return templates.REASON_SEPARATOR.join(reasons[:MAX_REASONS])

    @staticmethod
    def personalized_tips(
        dominant: StyleDimension,
        archetype: BehaviorArchetype,
    ) -> tuple[str, ...]:
        """Dominant-style tips followed by archetype tips, at most three."""
        tips = list(templates.STYLE_TIPS.get(dominant, ())[:MAX_STYLE_TIPS])
        tips.extend(templates.ARCHETYPE_TIPS.get(archetype, ()))
        return tuple(tips[:MAX_TIPS])
