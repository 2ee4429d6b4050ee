"""
Coding challenge evaluator.

This is a pattern heuristic, not a grader: submitted code is never run.
A test case "passes" when the code contains the item's expected pattern
(or no pattern is set) and the code is longer than 10 characters. Every
test case therefore passes or fails together.

A challenge with no test cases has one implicit slot that is never
passed, so it can not be answered correctly.
"""

from typing import Any

from skillquest.games.models import Item, TestCaseResult
from skillquest.games.types import ItemType

from . import register
from .base import ItemCheck, extract_code

MIN_CODE_LENGTH = 10


@register(ItemType.CODING)
class CodingEvaluator:
    """Evaluator for coding challenges (heuristic)."""

    def validate(self, item: Item) -> bool:
        return len(item.test_cases) > 0

    def check(self, item: Item, answer: Any) -> ItemCheck:
        code = extract_code(answer)
        heuristic_pass = code is not None and self._looks_complete(item, code)

        results = tuple(
            TestCaseResult(
                test_case=index + 1,
                passed=heuristic_pass,
                input=test_case.input,
                expected_output=test_case.expected_output,
            )
            for index, test_case in enumerate(item.test_cases)
        )
        passed = sum(1 for r in results if r.passed)
        total = len(results) or 1

        return ItemCheck(
            correct=passed == total,
            user_answer=code,
            expected=item.expected_pattern,
            test_results=results,
        )

    def _looks_complete(self, item: Item, code: str) -> bool:
        has_pattern = item.expected_pattern in code if item.expected_pattern else True
        return has_pattern and len(code) > MIN_CODE_LENGTH
