"""REST API routes for assessment, recommendations and summaries."""

import functools

import structlog
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from study_recommender.analysis.summary import LearnerSummary, summarize
from study_recommender.assessment.profile import build_profile
from study_recommender.assessment.questions import LIKERT_MAX, LIKERT_MIN, QUESTIONS
from study_recommender.config import get_settings, load_technique_catalog
from study_recommender.models.history import QuizResult, StudySession
from study_recommender.models.learner import LearnerProfile, LearningStyleVector
from study_recommender.models.recommendation import RecommendationReport
from study_recommender.models.technique import StudyTechnique
from study_recommender.recommendation.engine import RecommendationEngine

logger = structlog.get_logger()
router = APIRouter(prefix="/api")


class AssessmentRequest(BaseModel):
    responses: dict[str, int]
    user_id: str = "user-1"
    name: str = "Learning Explorer"


class HistoryRequest(BaseModel):
    style: LearningStyleVector
    quiz_results: list[QuizResult] = Field(default_factory=list)
    sessions: list[StudySession] = Field(default_factory=list)


class RecommendationRequest(HistoryRequest):
    limit: int | None = Field(default=None, ge=0)


@functools.lru_cache
def get_engine() -> RecommendationEngine:
    """Shared engine bound to the configured catalog."""
    settings = get_settings()
    return RecommendationEngine(catalog=load_technique_catalog(settings.catalog_path))


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/techniques")
async def list_techniques() -> list[StudyTechnique]:
    """List the technique catalog in catalog order."""
    return list(get_engine().catalog.techniques)


@router.get("/techniques/{technique_id}")
async def get_technique(technique_id: str) -> StudyTechnique:
    """Get a single catalog entry."""
    technique = get_engine().catalog.get(technique_id)
    if technique is None:
        raise HTTPException(status_code=404, detail="Technique not found")
    return technique


@router.get("/assessment/questions")
async def list_questions() -> list[dict]:
    """Learning style questionnaire."""
    return [
        {
            "id": q.id,
            "prompt": q.prompt,
            "dimension": q.dimension.value,
            "category": q.dimension.label,
        }
        for q in QUESTIONS
    ]


@router.post("/assessment")
async def submit_assessment(request: AssessmentRequest) -> LearnerProfile:
    """Classify questionnaire responses into a learner profile."""
    out_of_range = [
        qid for qid, rating in request.responses.items()
        if not LIKERT_MIN <= rating <= LIKERT_MAX
    ]
    if out_of_range:
        raise HTTPException(
            status_code=422,
            detail=f"Ratings must be between {LIKERT_MIN} and {LIKERT_MAX}: {out_of_range}",
        )
    return build_profile(request.responses, user_id=request.user_id, name=request.name)


@router.post("/recommendations")
async def recommend(request: RecommendationRequest) -> RecommendationReport:
    """Rank catalog techniques for the learner."""
    limit = get_settings().clamp_limit(request.limit)
    report = get_engine().report(
        request.style,
        request.quiz_results,
        request.sessions,
        limit=limit,
    )
    logger.info(
        "recommendations_served",
        archetype=report.archetype.value,
        count=len(report.recommendations),
    )
    return report


@router.post("/summary")
async def learner_summary(request: HistoryRequest) -> LearnerSummary:
    """Dashboard summary of the learner's history."""
    return summarize(request.quiz_results, request.sessions, style=request.style)
