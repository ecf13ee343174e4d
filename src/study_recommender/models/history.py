"""Quiz and study session history records."""

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from study_recommender.models.recommendation import Recommendation

PASSING_SCORE = 70.0


class QuizResult(BaseModel):
    """A completed quiz. Append-only history entry."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    score: float = Field(ge=0.0, le=100.0)
    topic: str = ""
    time_spent: float = Field(default=0.0, ge=0.0)  # minutes
    attempts: int = Field(default=1, ge=1)
    completed_at: datetime = Field(default_factory=datetime.now)

    @property
    def passed(self) -> bool:
        return self.score >= PASSING_SCORE


class StudySession(BaseModel):
    """A completed study session with one technique. Append-only history entry."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    technique_id: str
    duration: int = Field(ge=0)  # seconds
    rating: int = Field(ge=1, le=5)
    notes: str = ""
    completed_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def from_recommendation(
        cls,
        recommendation: "Recommendation",
        duration: int,
        rating: int,
        notes: str = "",
    ) -> "StudySession":
        """Record a finished session for a followed recommendation.

        Args:
            recommendation: The recommendation the learner acted on.
            duration: Time spent in seconds.
            rating: Learner rating, 1-5.
            notes: Free-form notes.

        Returns:
            New session record ready to append to history.
        """
        return cls(
            technique_id=recommendation.technique.id,
            duration=duration,
            rating=rating,
            notes=notes,
        )
