"""Questionnaire-based learning style classification."""

from collections.abc import Mapping, Sequence

import structlog

from study_recommender.assessment.questions import QUESTIONS, AssessmentQuestion
from study_recommender.models.learner import LearningStyleVector, StyleDimension

logger = structlog.get_logger()

SCORE_FLOOR = 0.1


class StyleClassifier:
    """Turns Likert responses into a normalized learning style vector.

    Each dimension scores the weighted sum of its diagnostic questions.
    Unanswered questions count as 0 and every dimension is floored at
    ``SCORE_FLOOR`` so the result never has a zero weight.

    Args:
        questions: Question bank with per-question dimension and weight.
    """

    def __init__(self, questions: Sequence[AssessmentQuestion] = QUESTIONS):
        self.questions = tuple(questions)

    def classify(self, responses: Mapping[str, float]) -> LearningStyleVector:
        """Classify questionnaire responses.

        Args:
            responses: Rating (1-5) keyed by question id.

        Returns:
            Style vector summing to 1.0.
        """
        scores = {dim: self.dimension_score(dim, responses) for dim in StyleDimension}
        vector = LearningStyleVector.from_scores(scores)
        logger.debug(
            "style_classified",
            answered=sum(1 for q in self.questions if q.id in responses),
            dominant=vector.dominant_style().value,
        )
        return vector

    def dimension_score(self, dimension: StyleDimension, responses: Mapping[str, float]) -> float:
        """Floored weighted score of a single dimension."""
        raw = sum(
            responses.get(q.id, 0) * q.weight
            for q in self.questions
            if q.dimension is dimension
        )
        return max(SCORE_FLOOR, raw)
