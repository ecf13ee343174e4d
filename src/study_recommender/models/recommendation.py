"""Recommendation output models."""

from pydantic import BaseModel, ConfigDict, Field

from study_recommender.models.archetype import BehaviorArchetype
from study_recommender.models.learner import StyleDimension
from study_recommender.models.technique import StudyTechnique

MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 0.95


class PerformanceSignal(BaseModel):
    """Short-term quiz performance summary."""

    model_config = ConfigDict(frozen=True)

    trend: float = 0.0  # mean score change per quiz, as a fraction of 100
    consistency: float = Field(default=0.5, ge=0.0, le=1.0)


class Recommendation(BaseModel):
    """A scored, explained technique suggestion."""

    model_config = ConfigDict(frozen=True)

    id: str
    technique: StudyTechnique
    confidence: float = Field(ge=MIN_CONFIDENCE, le=MAX_CONFIDENCE)
    reasoning: str
    personalized_tips: tuple[str, ...] = Field(default=(), max_length=3)


class RecommendationReport(BaseModel):
    """Ranked recommendations together with the learner signals behind them."""

    model_config = ConfigDict(frozen=True)

    archetype: BehaviorArchetype
    performance: PerformanceSignal
    dominant_style: StyleDimension
    recommendations: tuple[Recommendation, ...] = ()
