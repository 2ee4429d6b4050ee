"""
Adaptive learning: skill gaps, game recommendations and weekly plans.

Pipeline: gap analyzer -> recommender -> path generator.
"""

from skillquest.adaptive.gap_analyzer import GapThresholds, SkillGapAnalyzer, analyze_skill_gaps
from skillquest.adaptive.models import (
    GENERAL_FOCUS,
    LearningPathReport,
    LearningPathWeek,
    Recommendation,
    SkillGap,
)
from skillquest.adaptive.path_generator import (
    LearningPathGenerator,
    PathConfig,
    build_learning_path_report,
    generate_learning_path,
)
from skillquest.adaptive.recommender import (
    GameRecommender,
    RecommenderConfig,
    recommend_games,
    relevance_score,
)

__all__ = [
    "GENERAL_FOCUS",
    "GameRecommender",
    "GapThresholds",
    "LearningPathGenerator",
    "LearningPathReport",
    "LearningPathWeek",
    "PathConfig",
    "Recommendation",
    "RecommenderConfig",
    "SkillGap",
    "SkillGapAnalyzer",
    "analyze_skill_gaps",
    "build_learning_path_report",
    "generate_learning_path",
    "recommend_games",
    "relevance_score",
]
