"""Learner style and profile models."""

import math
from collections.abc import Mapping
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from study_recommender.models.technique import TechniqueType

_SUM_TOLERANCE = 1e-6


class StyleDimension(StrEnum):
    """The four VARK learning style dimensions, in tie-break order."""

    VISUAL = "visual"
    AUDITORY = "auditory"
    READING_WRITING = "reading_writing"
    KINESTHETIC = "kinesthetic"

    @property
    def technique_type(self) -> TechniqueType:
        """Technique type that matches this dimension."""
        if self is StyleDimension.READING_WRITING:
            return TechniqueType.READING
        return TechniqueType(self.value)

    @property
    def label(self) -> str:
        """Human-readable dimension name."""
        if self is StyleDimension.READING_WRITING:
            return "Reading/Writing"
        return self.value.capitalize()


class LearningStyleVector(BaseModel):
    """Normalized learning style weights.

    All four weights are strictly positive and sum to 1.0.
    """

    model_config = ConfigDict(frozen=True)

    visual: float = Field(gt=0.0)
    auditory: float = Field(gt=0.0)
    reading_writing: float = Field(gt=0.0)
    kinesthetic: float = Field(gt=0.0)

    @model_validator(mode="after")
    def _check_normalized(self) -> "LearningStyleVector":
        total = self.visual + self.auditory + self.reading_writing + self.kinesthetic
        if not math.isclose(total, 1.0, abs_tol=_SUM_TOLERANCE):
            raise ValueError(f"Style weights must sum to 1.0, got {total}")
        return self

    @classmethod
    def from_scores(cls, scores: Mapping[StyleDimension | str, float]) -> "LearningStyleVector":
        """Build a vector by normalizing raw positive dimension scores.

        Args:
            scores: Raw score per dimension. Every dimension must be present
                and positive.

        Returns:
            Normalized style vector.
        """
        # StrEnum members hash like their values, so plain string keys match too
        raw = {dim.value: float(scores.get(dim, 0.0)) for dim in StyleDimension}
        missing = [name for name, value in raw.items() if value <= 0]
        if missing:
            raise ValueError(f"Style scores must be positive for every dimension: {missing}")
        total = sum(raw.values())
        return cls(**{name: value / total for name, value in raw.items()})

    def weight(self, dimension: StyleDimension) -> float:
        """Weight of a single dimension."""
        return getattr(self, dimension.value)

    def weight_for(self, technique_type: TechniqueType) -> float:
        """Style weight that backs a technique type.

        Mixed techniques draw on the strongest dimension.
        """
        if technique_type is TechniqueType.MIXED:
            return max(self.weight(dim) for dim in StyleDimension)
        for dim in StyleDimension:
            if dim.technique_type is technique_type:
                return self.weight(dim)
        raise ValueError(f"Unknown technique type: {technique_type}")

    def dominant_style(self) -> StyleDimension:
        """Dimension with the single highest weight (first wins on ties)."""
        dominant = StyleDimension.VISUAL
        for dim in StyleDimension:
            if self.weight(dim) > self.weight(dominant):
                dominant = dim
        return dominant

    def as_percentages(self) -> dict[str, int]:
        """Rounded percentage per dimension, for display."""
        return {dim.value: round(self.weight(dim) * 100) for dim in StyleDimension}


class LearnerProfile(BaseModel):
    """Outcome of a completed style assessment."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    name: str = "Learning Explorer"
    learning_style: LearningStyleVector
    dominant_style: str  # display label, e.g. "Reading/Writing"
    preferences: tuple[str, ...] = ()  # question ids rated 4 or 5
    created_at: datetime = Field(default_factory=datetime.now)
