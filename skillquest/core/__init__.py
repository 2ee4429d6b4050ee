"""
Core: numeric scoring rules and shared error types.
"""

from skillquest.core.errors import SkillQuestError, ValidationError
from skillquest.core.scoring import (
    feedback_tier,
    level_for_xp,
    percentage,
    round_half_up,
    time_bonus,
    xp_for_result,
)

__all__ = [
    "SkillQuestError",
    "ValidationError",
    "feedback_tier",
    "level_for_xp",
    "percentage",
    "round_half_up",
    "time_bonus",
    "xp_for_result",
]
