"""Smoke tests for Pydantic models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from study_recommender.models.archetype import ARCHETYPE_PROFILES, BehaviorArchetype
from study_recommender.models.history import QuizResult, StudySession
from study_recommender.models.learner import LearningStyleVector, StyleDimension
from study_recommender.models.recommendation import PerformanceSignal, Recommendation
from study_recommender.models.technique import (
    CatalogError,
    Difficulty,
    StudyTechnique,
    TechniqueCatalog,
    TechniqueType,
)


def _technique(technique_id: str = "t1", **overrides) -> StudyTechnique:
    data = {
        "id": technique_id,
        "name": f"Technique {technique_id}",
        "type": TechniqueType.VISUAL,
        "effectiveness": 0.8,
        "difficulty": Difficulty.BEGINNER,
        "estimated_time": 15,
    }
    data.update(overrides)
    return StudyTechnique(**data)


class TestLearningStyleVector:
    def test_valid_vector(self):
        vector = LearningStyleVector(
            visual=0.4, auditory=0.3, reading_writing=0.2, kinesthetic=0.1
        )
        assert vector.visual == 0.4
        assert vector.reading_writing == 0.2

    def test_rejects_unnormalized(self):
        with pytest.raises(ValidationError):
            LearningStyleVector(visual=0.5, auditory=0.5, reading_writing=0.5, kinesthetic=0.5)

    def test_rejects_negative(self):
        with pytest.raises(ValidationError):
            LearningStyleVector(visual=1.0, auditory=-0.2, reading_writing=0.1, kinesthetic=0.1)

    def test_rejects_zero_component(self):
        with pytest.raises(ValidationError):
            LearningStyleVector(visual=1.0, auditory=0.0, reading_writing=0.0, kinesthetic=0.0)

    def test_is_frozen(self):
        vector = LearningStyleVector(
            visual=0.25, auditory=0.25, reading_writing=0.25, kinesthetic=0.25
        )
        with pytest.raises(ValidationError):
            vector.visual = 0.9

    def test_from_scores_normalizes(self):
        vector = LearningStyleVector.from_scores(
            {"visual": 2.0, "auditory": 1.0, "reading_writing": 0.5, "kinesthetic": 0.5}
        )
        assert vector.visual == pytest.approx(0.5)
        assert vector.kinesthetic == pytest.approx(0.125)
        total = vector.visual + vector.auditory + vector.reading_writing + vector.kinesthetic
        assert total == pytest.approx(1.0)

    def test_from_scores_accepts_enum_keys(self):
        vector = LearningStyleVector.from_scores({dim: 1.0 for dim in StyleDimension})
        assert vector.kinesthetic == pytest.approx(0.25)

    def test_from_scores_rejects_all_zero(self):
        with pytest.raises(ValueError):
            LearningStyleVector.from_scores({})

    def test_from_scores_rejects_missing_dimension(self):
        with pytest.raises(ValueError):
            LearningStyleVector.from_scores(
                {"visual": 2.0, "auditory": 1.0, "reading_writing": 1.0}
            )

    def test_from_scores_rejects_zero_dimension(self):
        with pytest.raises(ValueError):
            LearningStyleVector.from_scores(
                {"visual": 2.0, "auditory": 1.0, "reading_writing": 1.0, "kinesthetic": 0.0}
            )

    def test_dominant_style(self):
        vector = LearningStyleVector(
            visual=0.1, auditory=0.2, reading_writing=0.5, kinesthetic=0.2
        )
        assert vector.dominant_style() is StyleDimension.READING_WRITING

    def test_dominant_style_tie_prefers_first(self):
        vector = LearningStyleVector(
            visual=0.1, auditory=0.4, reading_writing=0.1, kinesthetic=0.4
        )
        assert vector.dominant_style() is StyleDimension.AUDITORY

    def test_weight_for_mixed_uses_max(self):
        vector = LearningStyleVector(
            visual=0.1, auditory=0.2, reading_writing=0.3, kinesthetic=0.4
        )
        assert vector.weight_for(TechniqueType.MIXED) == 0.4
        assert vector.weight_for(TechniqueType.READING) == 0.3

    def test_as_percentages(self):
        vector = LearningStyleVector(
            visual=0.5, auditory=0.2, reading_writing=0.2, kinesthetic=0.1
        )
        assert vector.as_percentages() == {
            "visual": 50,
            "auditory": 20,
            "reading_writing": 20,
            "kinesthetic": 10,
        }


class TestStyleDimension:
    def test_technique_type_mapping(self):
        assert StyleDimension.READING_WRITING.technique_type is TechniqueType.READING
        assert StyleDimension.VISUAL.technique_type is TechniqueType.VISUAL

    def test_labels(self):
        assert StyleDimension.READING_WRITING.label == "Reading/Writing"
        assert StyleDimension.KINESTHETIC.label == "Kinesthetic"


class TestHistoryRecords:
    def test_quiz_defaults(self):
        result = QuizResult(score=75)
        assert result.attempts == 1
        assert isinstance(result.completed_at, datetime)
        assert result.passed is True

    def test_quiz_passing_boundary(self):
        assert QuizResult(score=70).passed is True
        assert QuizResult(score=69.9).passed is False

    def test_quiz_rejects_out_of_range(self):
        with pytest.raises(ValidationError):
            QuizResult(score=101)
        with pytest.raises(ValidationError):
            QuizResult(score=50, attempts=0)
        with pytest.raises(ValidationError):
            QuizResult(score=50, time_spent=-1)

    def test_session_rating_range(self):
        with pytest.raises(ValidationError):
            StudySession(technique_id="1", duration=60, rating=6)
        with pytest.raises(ValidationError):
            StudySession(technique_id="1", duration=-5, rating=3)

    def test_session_from_recommendation(self):
        technique = _technique("7")
        recommendation = Recommendation(
            id="rec-7", technique=technique, confidence=0.5, reasoning="Because"
        )
        session = StudySession.from_recommendation(recommendation, 900, 4, notes="good")
        assert session.technique_id == "7"
        assert session.duration == 900
        assert session.rating == 4
        assert session.notes == "good"


class TestRecommendation:
    def test_confidence_bounds(self):
        with pytest.raises(ValidationError):
            Recommendation(id="rec-1", technique=_technique(), confidence=0.99, reasoning="x")
        with pytest.raises(ValidationError):
            Recommendation(id="rec-1", technique=_technique(), confidence=0.05, reasoning="x")

    def test_tip_limit(self):
        with pytest.raises(ValidationError):
            Recommendation(
                id="rec-1",
                technique=_technique(),
                confidence=0.5,
                reasoning="x",
                personalized_tips=("a", "b", "c", "d"),
            )

    def test_neutral_performance_signal(self):
        signal = PerformanceSignal()
        assert signal.trend == 0.0
        assert signal.consistency == 0.5


class TestArchetypes:
    def test_enumeration_order(self):
        assert list(BehaviorArchetype) == [
            BehaviorArchetype.FAST_LEARNER,
            BehaviorArchetype.METHODICAL,
            BehaviorArchetype.STRUGGLING,
            BehaviorArchetype.INCONSISTENT,
        ]

    def test_every_archetype_has_profile(self):
        assert list(ARCHETYPE_PROFILES) == list(BehaviorArchetype)
        assert ARCHETYPE_PROFILES[BehaviorArchetype.METHODICAL].avg_time == 35.0

    def test_values(self):
        assert BehaviorArchetype.FAST_LEARNER == "fast-learner"


class TestTechniqueCatalog:
    def test_lookup_and_order(self):
        catalog = TechniqueCatalog([_technique("a"), _technique("b")])
        assert len(catalog) == 2
        assert [t.id for t in catalog] == ["a", "b"]
        assert catalog.get("b").id == "b"
        assert catalog.get("missing") is None
        assert "a" in catalog
        assert catalog.techniques == tuple(catalog)

    def test_duplicate_ids_rejected(self):
        with pytest.raises(CatalogError):
            TechniqueCatalog([_technique("a"), _technique("a")])

    def test_technique_validation(self):
        with pytest.raises(ValidationError):
            _technique(effectiveness=0.0)
        with pytest.raises(ValidationError):
            _technique(type="smell")

    def test_tags_are_tuple(self):
        technique = _technique(tags=["memory", "review"])
        assert technique.tags == ("memory", "review")
