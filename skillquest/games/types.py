"""
Enumerations shared by game definitions, items and results.
"""

from __future__ import annotations

from enum import Enum


class GameType(str, Enum):
    """Supported game types."""
    QUIZ = "quiz"
    CODING = "coding"
    SIMULATION = "simulation"


class Difficulty(str, Enum):
    """Game difficulty levels."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ItemType(str, Enum):
    """Item variants. Each has exactly one evaluator."""
    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"
    TEXT = "text"
    CODING = "coding"
    SCENARIO = "scenario"


# Item types a quiz question may declare in its own "type" field
QUIZ_ITEM_TYPES = frozenset({ItemType.MULTIPLE_CHOICE, ItemType.TRUE_FALSE, ItemType.TEXT})

# Defaults applied when a definition leaves them out
DEFAULT_XP_REWARD: dict[GameType, int] = {
    GameType.QUIZ: 10,
    GameType.CODING: 15,
    GameType.SIMULATION: 12,
}

DEFAULT_ITEM_POINTS: dict[GameType, int] = {
    GameType.QUIZ: 1,
    GameType.CODING: 5,
    GameType.SIMULATION: 3,
}
