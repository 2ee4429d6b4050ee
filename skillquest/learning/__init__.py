"""
Learning: learner progress state and the proficiency tracker that updates it.
"""

from skillquest.learning.models import DEFAULT_SKILLS, GameHistoryEntry, LearnerProgress, SkillState
from skillquest.learning.proficiency_tracker import (
    SKILL_WEIGHTS,
    SkillProficiencyTracker,
    apply_result,
    employability_score,
    next_streak,
    proficiency,
)

__all__ = [
    "DEFAULT_SKILLS",
    "GameHistoryEntry",
    "LearnerProgress",
    "SKILL_WEIGHTS",
    "SkillProficiencyTracker",
    "SkillState",
    "apply_result",
    "employability_score",
    "next_streak",
    "proficiency",
]
