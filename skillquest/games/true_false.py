"""
True/False item evaluator.

Both sides are coerced with bool() before comparing, so any non-empty
value counts as True and an empty string counts as False. A missing (None)
answer is incorrect even when the expected answer is False.
"""

from typing import Any

from skillquest.games.models import Item
from skillquest.games.types import ItemType

from . import register
from .base import ItemCheck, is_missing


@register(ItemType.TRUE_FALSE)
class TrueFalseEvaluator:
    """Evaluator for true/false statements."""

    def validate(self, item: Item) -> bool:
        return item.correct_answer is not None

    def check(self, item: Item, answer: Any) -> ItemCheck:
        expected = bool(item.correct_answer)
        if is_missing(answer):
            return ItemCheck(correct=False, user_answer=answer, expected=expected)

        return ItemCheck(
            correct=bool(answer) == expected,
            user_answer=answer,
            expected=expected,
        )
