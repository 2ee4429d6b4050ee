"""
Cohort Stats: engagement and difficulty balance across many learners.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from skillquest.core.scoring import round_half_up
from skillquest.learning.models import LearnerProgress, as_local_time

ACTIVE_WINDOW_DAYS = 7
UNKNOWN_DIFFICULTY = "unknown"


def engagement_summary(learners: Iterable[LearnerProgress], now: datetime | None = None) -> dict:
    """
    Engagement metrics for a cohort.

    A learner is active when their last activity falls inside the
    trailing 7-day window. Averages are 0 for an empty cohort.

    Returns:
        Dict with total_learners, active_learners, total_games_played,
        average_xp, average_employability_score
    """
    learners = list(learners)
    now = as_local_time(now or datetime.now())
    since = now - timedelta(days=ACTIVE_WINDOW_DAYS)

    total = len(learners)
    active = sum(
        1 for p in learners
        if p.last_active_date is not None and as_local_time(p.last_active_date) >= since
    )

    return {
        "total_learners": total,
        "active_learners": active,
        "total_games_played": sum(len(p.game_history) for p in learners),
        "average_xp": round_half_up(sum(p.xp for p in learners) / total) if total else 0,
        "average_employability_score": (
            round_half_up(sum(p.employability_score for p in learners) / total) if total else 0
        ),
    }


def difficulty_balance(learners: Iterable[LearnerProgress]) -> list[dict]:
    """
    Games played and mean accuracy per difficulty across every history.

    Difficulties appear in first-seen order; blank ones count as "unknown".

    Returns:
        List of dicts with difficulty, games_played, average_accuracy
    """
    counts: dict[str, int] = {}
    totals: dict[str, float] = {}
    for progress in learners:
        for entry in progress.game_history:
            difficulty = entry.difficulty or UNKNOWN_DIFFICULTY
            counts[difficulty] = counts.get(difficulty, 0) + 1
            totals[difficulty] = totals.get(difficulty, 0.0) + (entry.accuracy or 0)

    return [
        {
            "difficulty": difficulty,
            "games_played": count,
            "average_accuracy": totals[difficulty] / count,
        }
        for difficulty, count in counts.items()
    ]
