"""
SkillQuest: gamified skill-assessment engine.

Grades game submissions, folds results into learner progress and derives
skill gaps, game recommendations and weekly learning paths.
"""

from skillquest.adaptive import (
    LearningPathReport,
    LearningPathWeek,
    Recommendation,
    SkillGap,
    analyze_skill_gaps,
    build_learning_path_report,
    generate_learning_path,
    recommend_games,
)
from skillquest.core.errors import SkillQuestError, ValidationError
from skillquest.games.engine import GameEngine, load_game, process_result
from skillquest.games.models import GameDefinition, GameResult, Item, ItemOutcome
from skillquest.games.types import Difficulty, GameType, ItemType
from skillquest.learning import LearnerProgress, SkillState, apply_result

__version__ = "1.0.0"

__all__ = [
    "Difficulty",
    "GameDefinition",
    "GameEngine",
    "GameResult",
    "GameType",
    "Item",
    "ItemOutcome",
    "ItemType",
    "LearnerProgress",
    "LearningPathReport",
    "LearningPathWeek",
    "Recommendation",
    "SkillGap",
    "SkillQuestError",
    "SkillState",
    "ValidationError",
    "analyze_skill_gaps",
    "apply_result",
    "build_learning_path_report",
    "generate_learning_path",
    "load_game",
    "process_result",
    "recommend_games",
]
