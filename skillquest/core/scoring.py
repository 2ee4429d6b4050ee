"""
Scoring Model: pure numeric rules shared by every game type.

Covers:
- Time bonus multiplier (speed relative to the game's time limit)
- XP formula (reward x accuracy x time bonus)
- Percentage aggregation for accuracy and score
- Feedback tiers and the XP -> level curve

All functions are stateless. Rounding is half-up so that a result of
exactly x.5 always rounds away from zero, independent of the float's parity.
"""

from __future__ import annotations

import math
from enum import Enum

# Time ratio thresholds (time_spent / time_limit) and their multipliers
FAST_RATIO = 0.5
NORMAL_RATIO = 0.8
ON_TIME_RATIO = 1.0

FAST_BONUS = 1.2
NORMAL_BONUS = 1.0
SLOW_BONUS = 0.9
OVERTIME_BONUS = 0.7

XP_PER_LEVEL_UNIT = 100


class FeedbackTier(str, Enum):
    """Accuracy bands used to pick a feedback message."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_IMPROVEMENT = "needs_improvement"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 rounding up."""
    return int(math.floor(value + 0.5))


def time_bonus(time_limit: float | None, time_spent: float) -> float:
    """
    Multiplier applied to XP based on completion speed.

    Args:
        time_limit: Game time limit in seconds (None or 0 = untimed)
        time_spent: Seconds the learner took

    Returns:
        1.2 for fast, 1.0 for normal, 0.9 for slightly slow, 0.7 over time.
        Untimed games always get 1.0.
    """
    if not time_limit:
        return NORMAL_BONUS

    ratio = time_spent / time_limit
    if ratio <= FAST_RATIO:
        return FAST_BONUS
    if ratio <= NORMAL_RATIO:
        return NORMAL_BONUS
    if ratio <= ON_TIME_RATIO:
        return SLOW_BONUS
    return OVERTIME_BONUS


def percentage(part: float, whole: float) -> float:
    """Unrounded percentage, 0.0 when whole is zero."""
    if whole <= 0:
        return 0.0
    return part / whole * 100


def xp_for_result(xp_reward: int, accuracy: float, bonus: float) -> int:
    """XP earned for one play. Uses the unrounded accuracy."""
    return max(0, round_half_up(xp_reward * (accuracy / 100) * bonus))


def feedback_tier(accuracy: float) -> FeedbackTier:
    """Map an accuracy percentage to its feedback tier."""
    if accuracy >= 90:
        return FeedbackTier.EXCELLENT
    if accuracy >= 70:
        return FeedbackTier.GOOD
    if accuracy >= 50:
        return FeedbackTier.FAIR
    return FeedbackTier.NEEDS_IMPROVEMENT


def level_for_xp(xp: float) -> int:
    """Level curve: floor(sqrt(xp / 100)) + 1."""
    return int(math.floor(math.sqrt(max(xp, 0) / XP_PER_LEVEL_UNIT))) + 1
