"""
Analytics: per-learner dashboards and cohort-wide engagement stats.
"""

from skillquest.analytics.cohort_stats import difficulty_balance, engagement_summary
from skillquest.analytics.learner_stats import learner_summary, recent_games, score_trends, skill_heatmap

__all__ = [
    "difficulty_balance",
    "engagement_summary",
    "learner_summary",
    "recent_games",
    "score_trends",
    "skill_heatmap",
]
