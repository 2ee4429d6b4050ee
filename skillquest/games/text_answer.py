"""
Free-text item evaluator.

Lenient matching: both sides are lower-cased and trimmed, then the answer
is accepted on an exact match or when either string contains the other.
A blank answer is contained in every expected answer, so it is accepted.
"""

from typing import Any

from skillquest.games.models import Item
from skillquest.games.types import ItemType

from . import register
from .base import ItemCheck, as_text, is_missing


@register(ItemType.TEXT)
class TextAnswerEvaluator:
    """Evaluator for short free-text answers."""

    def validate(self, item: Item) -> bool:
        return item.correct_answer is not None

    def check(self, item: Item, answer: Any) -> ItemCheck:
        if is_missing(answer):
            return ItemCheck(correct=False, user_answer=answer, expected=item.correct_answer)

        return ItemCheck(
            correct=self._grade(as_text(answer), as_text(item.correct_answer)),
            user_answer=answer,
            expected=item.correct_answer,
        )

    def _grade(self, user_answer: str, correct: str) -> bool:
        user = user_answer.lower().strip()
        expected = correct.lower().strip()
        return user == expected or user in expected or expected in user
