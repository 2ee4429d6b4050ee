"""
Multiple-choice item evaluator.

The answer is correct when its string form equals the string form of the
item's correct answer. Options are informational; the answer may be the
option text or its index, whichever the definition stores.
"""

from typing import Any

from skillquest.games.models import Item
from skillquest.games.types import ItemType

from . import register
from .base import ItemCheck, as_text, is_missing


@register(ItemType.MULTIPLE_CHOICE)
class MultipleChoiceEvaluator:
    """Evaluator for multiple-choice questions."""

    def validate(self, item: Item) -> bool:
        return item.correct_answer is not None

    def check(self, item: Item, answer: Any) -> ItemCheck:
        if is_missing(answer):
            return ItemCheck(correct=False, user_answer=answer, expected=item.correct_answer)

        return ItemCheck(
            correct=as_text(answer) == as_text(item.correct_answer),
            user_answer=answer,
            expected=item.correct_answer,
        )
