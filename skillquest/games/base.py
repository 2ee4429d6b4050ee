"""
Base protocol and helpers for item evaluators.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from skillquest.games.models import Item, TestCaseResult


@dataclass
class ItemCheck:
    """Result of checking one answer against one item."""
    correct: bool
    user_answer: Any
    expected: Any
    test_results: tuple[TestCaseResult, ...] = ()


def is_missing(answer: Any) -> bool:
    """Only an absent (None) answer is missing; blank strings are graded like any other."""
    return answer is None


def as_text(value: Any) -> str:
    """
    Canonical string form used for answer comparison.

    Booleans render as 'true'/'false' and integral floats drop their
    fractional part, so 2 and 2.0 compare equal.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if value is None:
        return ""
    return str(value)


def extract_code(answer: Any) -> str | None:
    """Coding answers arrive either as a code string or as {"code": ...}."""
    if isinstance(answer, Mapping):
        answer = answer.get("code")
    return answer if isinstance(answer, str) else None


class ItemEvaluator(Protocol):
    """Protocol for item evaluators."""

    def validate(self, item: Item) -> bool:
        """Check if the item has the fields this evaluator needs."""
        ...

    def check(self, item: Item, answer: Any) -> ItemCheck:
        """Decide whether the answer is correct."""
        ...
