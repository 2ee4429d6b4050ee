"""
Simulation scenario evaluator.

The chosen option token must equal the scenario's correct choice
(string forms compared).
"""

from typing import Any

from skillquest.games.models import Item
from skillquest.games.types import ItemType

from . import register
from .base import ItemCheck, as_text, is_missing


@register(ItemType.SCENARIO)
class ScenarioEvaluator:
    """Evaluator for simulation scenarios."""

    def validate(self, item: Item) -> bool:
        return item.correct_choice is not None

    def check(self, item: Item, answer: Any) -> ItemCheck:
        if is_missing(answer):
            return ItemCheck(correct=False, user_answer=answer, expected=item.correct_choice)

        return ItemCheck(
            correct=as_text(answer) == as_text(item.correct_choice),
            user_answer=answer,
            expected=item.correct_choice,
        )
