"""Learner profile construction from a completed assessment."""

from collections.abc import Mapping

import structlog

from study_recommender.assessment.style_classifier import StyleClassifier
from study_recommender.models.learner import LearnerProfile

logger = structlog.get_logger()

PREFERENCE_THRESHOLD = 4


def extract_preferences(responses: Mapping[str, float]) -> tuple[str, ...]:
    """Question ids the learner agreed with (rated 4 or higher), in answer order."""
    return tuple(qid for qid, rating in responses.items() if rating >= PREFERENCE_THRESHOLD)


def build_profile(
    responses: Mapping[str, float],
    user_id: str = "user-1",
    name: str = "Learning Explorer",
    classifier: StyleClassifier | None = None,
) -> LearnerProfile:
    """Classify responses and wrap them in a learner profile.

    Args:
        responses: Rating (1-5) keyed by question id.
        user_id: Learner identifier.
        name: Display name.
        classifier: Classifier to use; defaults to the standard question bank.

    Returns:
        Profile carrying the style vector, dominant style label and preferences.
    """
    classifier = classifier or StyleClassifier()
    style = classifier.classify(responses)
    profile = LearnerProfile(
        user_id=user_id,
        name=name,
        learning_style=style,
        dominant_style=style.dominant_style().label,
        preferences=extract_preferences(responses),
    )
    logger.info("learner_profile_built", user_id=user_id, dominant_style=profile.dominant_style)
    return profile
