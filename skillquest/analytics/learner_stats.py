"""
Learner Stats: per-learner analytics derived from LearnerProgress.

Provides the skill heatmap, daily score trends over a trailing window,
recent games and a combined summary for dashboards.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, timedelta

from skillquest.learning.models import GameHistoryEntry, LearnerProgress, as_local_time
from skillquest.learning.proficiency_tracker import proficiency

TREND_WINDOW_DAYS = 7
RECENT_GAMES_LIMIT = 5


def skill_heatmap(progress: LearnerProgress) -> list[dict]:
    """
    One row per skill, in profile order.

    Returns:
        List of dicts with skill, xp, accuracy, attempts, proficiency
    """
    return [
        {
            "skill": skill,
            "xp": state.xp,
            "accuracy": state.accuracy,
            "attempts": state.attempts,
            "proficiency": proficiency(state),
        }
        for skill, state in progress.skills.items()
    ]


def _window_entries(progress: LearnerProgress, now: datetime, days: int) -> list[GameHistoryEntry]:
    since = now - timedelta(days=days)
    return [entry for entry in progress.game_history if entry.completed_at >= since]


def score_trends(progress: LearnerProgress, now: datetime | None = None, days: int = TREND_WINDOW_DAYS) -> list[dict]:
    """
    Average score per calendar day over the trailing window.

    Returns:
        List of dicts with date (ISO string) and average_score, oldest first
    """
    now = as_local_time(now or datetime.now())
    daily: dict[date, list[int]] = defaultdict(list)
    for entry in _window_entries(progress, now, days):
        daily[entry.completed_at.date()].append(entry.score)

    return [
        {"date": day.isoformat(), "average_score": sum(scores) / len(scores)}
        for day, scores in sorted(daily.items())
    ]


def recent_games(
    progress: LearnerProgress,
    now: datetime | None = None,
    days: int = TREND_WINDOW_DAYS,
    limit: int = RECENT_GAMES_LIMIT,
) -> list[GameHistoryEntry]:
    """The last `limit` games played inside the trailing window."""
    now = as_local_time(now or datetime.now())
    entries = _window_entries(progress, now, days)
    return entries[-limit:] if limit > 0 else []


def learner_summary(progress: LearnerProgress, now: datetime | None = None) -> dict:
    """
    Dashboard summary for one learner.

    Returns:
        Dict with xp, level, badges, streak, employability_score,
        total_games, skill_heatmap, score_trends, recent_games
    """
    now = as_local_time(now or datetime.now())
    return {
        "xp": progress.xp,
        "level": progress.level,
        "badges": sorted(progress.badges),
        "streak": progress.streak,
        "employability_score": progress.employability_score,
        "total_games": len(progress.game_history),
        "skill_heatmap": skill_heatmap(progress),
        "score_trends": score_trends(progress, now),
        "recent_games": [entry.to_dict() for entry in recent_games(progress, now)],
    }
