"""Learning style questionnaire."""

from typing import NamedTuple

from study_recommender.models.learner import StyleDimension

LIKERT_MIN = 1
LIKERT_MAX = 5


class AssessmentQuestion(NamedTuple):
    id: str
    prompt: str
    dimension: StyleDimension
    weight: float


QUESTIONS: tuple[AssessmentQuestion, ...] = (
    AssessmentQuestion(
        "timeOnVisuals",
        "I learn better when information is presented with charts, diagrams, or visual aids",
        StyleDimension.VISUAL,
        0.3,
    ),
    AssessmentQuestion(
        "prefersDiagrams",
        "I prefer to see the overall picture before focusing on details",
        StyleDimension.VISUAL,
        0.4,
    ),
    AssessmentQuestion(
        "colorCoding",
        "I use colors, highlights, or visual markers when studying",
        StyleDimension.VISUAL,
        0.3,
    ),
    AssessmentQuestion(
        "likesMusic",
        "I often study better with background music or sounds",
        StyleDimension.AUDITORY,
        0.3,
    ),
    AssessmentQuestion(
        "prefersDiscussion",
        "I learn best through discussions and verbal explanations",
        StyleDimension.AUDITORY,
        0.4,
    ),
    AssessmentQuestion(
        "readAloud",
        "I often read aloud or talk through problems to understand them",
        StyleDimension.AUDITORY,
        0.3,
    ),
    AssessmentQuestion(
        "takesNotes",
        "I learn best by taking detailed written notes",
        StyleDimension.READING_WRITING,
        0.4,
    ),
    AssessmentQuestion(
        "readsInstructions",
        "I prefer to read instructions carefully before starting a task",
        StyleDimension.READING_WRITING,
        0.3,
    ),
    AssessmentQuestion(
        "writesToLearn",
        "Writing summaries helps me remember information better",
        StyleDimension.READING_WRITING,
        0.3,
    ),
    AssessmentQuestion(
        "needsMovement",
        "I need to move around or use my hands while learning",
        StyleDimension.KINESTHETIC,
        0.4,
    ),
    AssessmentQuestion(
        "learnsByDoing",
        "I learn best through hands-on experience and practice",
        StyleDimension.KINESTHETIC,
        0.3,
    ),
    AssessmentQuestion(
        "usesGestures",
        "I use gestures and body movement when explaining concepts",
        StyleDimension.KINESTHETIC,
        0.3,
    ),
)


def questions_for(dimension: StyleDimension) -> tuple[AssessmentQuestion, ...]:
    """Questions diagnostic of a single style dimension."""
    return tuple(q for q in QUESTIONS if q.dimension is dimension)
