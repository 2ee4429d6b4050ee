"""
Game definitions, item evaluators and the result processor.

Each item type (multiple-choice, true-false, text, coding, scenario) has its
own evaluator module with:
- validate(): Check the item carries what the evaluator needs
- check(): Decide whether a single answer is correct
"""

from typing import TYPE_CHECKING

from skillquest.games.types import (
    DEFAULT_ITEM_POINTS,
    DEFAULT_XP_REWARD,
    QUIZ_ITEM_TYPES,
    Difficulty,
    GameType,
    ItemType,
)

if TYPE_CHECKING:
    from .base import ItemEvaluator


# Evaluator registry - populated by @register decorator
EVALUATORS: dict[ItemType, "ItemEvaluator"] = {}


def register(item_type: ItemType):
    """Decorator to register an item evaluator."""
    def decorator(cls):
        EVALUATORS[item_type] = cls()
        return cls
    return decorator


def get_evaluator(item_type: str | ItemType) -> "ItemEvaluator | None":
    """Get the evaluator for an item type."""
    if isinstance(item_type, str):
        try:
            item_type = ItemType(item_type.lower())
        except ValueError:
            return None
    return EVALUATORS.get(item_type)


# Import evaluators to trigger registration
from . import multiple_choice
from . import true_false
from . import text_answer
from . import coding
from . import scenario

__all__ = [
    "DEFAULT_ITEM_POINTS",
    "DEFAULT_XP_REWARD",
    "EVALUATORS",
    "QUIZ_ITEM_TYPES",
    "Difficulty",
    "GameType",
    "ItemType",
    "get_evaluator",
    "register",
]
