"""English text templates for recommendation reasoning and tips.

Keyed by dominant style and archetype so another locale can swap the
whole table.
"""

from study_recommender.models.archetype import BehaviorArchetype
from study_recommender.models.learner import StyleDimension

REASON_SEPARATOR = " • "

STYLE_MATCH_REASON = "Matches your {style} learning preference"

HIGH_EFFECTIVENESS_REASON = "Proven high effectiveness rate"

ARCHETYPE_REASONS: dict[BehaviorArchetype, str] = {
    BehaviorArchetype.FAST_LEARNER: "Suitable for your quick learning pace",
    BehaviorArchetype.METHODICAL: "Aligns with your systematic approach",
    BehaviorArchetype.STRUGGLING: "Designed to build confidence gradually",
    BehaviorArchetype.INCONSISTENT: "Flexible format fits your schedule",
}

STYLE_TIPS: dict[StyleDimension, tuple[str, ...]] = {
    StyleDimension.VISUAL: (
        "Use color coding and diagrams",
        "Create visual summaries",
        "Watch for patterns and connections",
    ),
    StyleDimension.AUDITORY: (
        "Read content aloud",
        "Use background music if helpful",
        "Discuss with others or record yourself",
    ),
    StyleDimension.READING_WRITING: (
        "Take detailed notes",
        "Summarize in your own words",
        "Create outlines and lists",
    ),
    StyleDimension.KINESTHETIC: (
        "Take breaks to move around",
        "Use hands-on examples",
        "Apply concepts immediately",
    ),
}

ARCHETYPE_TIPS: dict[BehaviorArchetype, tuple[str, ...]] = {
    BehaviorArchetype.FAST_LEARNER: (
        "Challenge yourself with advanced concepts",
        "Set time limits for focused practice",
    ),
    BehaviorArchetype.METHODICAL: (
        "Follow a structured approach",
        "Check your understanding at each step",
    ),
    BehaviorArchetype.STRUGGLING: (
        "Start with easier examples",
        "Don't hesitate to review fundamentals",
    ),
    BehaviorArchetype.INCONSISTENT: (
        "Set small, achievable goals",
        "Use reminders and scheduling",
    ),
}
