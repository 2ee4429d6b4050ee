"""
Game domain records: definitions, items and graded results.

Definitions are immutable once loaded. Dict conversion uses the camelCase
keys of the stored game documents so that records round-trip through the
persistence layer unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from skillquest.games.types import Difficulty, GameType, ItemType


def item_type_name(item_type: ItemType | str) -> str:
    return item_type.value if isinstance(item_type, ItemType) else item_type


@dataclass(frozen=True)
class TestCase:
    """One input/expected-output pair of a coding challenge."""

    __test__ = False  # not a pytest class

    input: Any = None
    expected_output: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"input": self.input, "expectedOutput": self.expected_output}


@dataclass(frozen=True)
class Item:
    """
    A single gradable item, tagged by item_type.

    Only the fields relevant to the tag are populated:
    - multiple-choice: options, correct_answer
    - true-false / text: correct_answer
    - coding: test_cases, expected_pattern
    - scenario: correct_choice (options optional)

    A quiz question with an unsupported type keeps its raw type string;
    no evaluator matches it, so it is always scored incorrect.
    """

    item_type: ItemType | str
    item_id: str | int
    points: int | float
    prompt: str | None = None
    options: tuple[Any, ...] = ()
    correct_answer: Any = None
    test_cases: tuple[TestCase, ...] = ()
    expected_pattern: str | None = None
    correct_choice: Any = None
    explanation: str | None = None

    @property
    def type_name(self) -> str:
        return item_type_name(self.item_type)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.item_id, "points": self.points}

        if self.item_type == ItemType.CODING:
            data["description"] = self.prompt
            data["testCases"] = [tc.to_dict() for tc in self.test_cases]
            if self.expected_pattern is not None:
                data["expectedPattern"] = self.expected_pattern
        elif self.item_type == ItemType.SCENARIO:
            data["description"] = self.prompt
            data["correctChoice"] = self.correct_choice
            if self.options:
                data["options"] = list(self.options)
        else:
            data["type"] = self.type_name
            data["question"] = self.prompt
            data["correctAnswer"] = self.correct_answer
            if self.options:
                data["options"] = list(self.options)

        if self.explanation is not None:
            data["explanation"] = self.explanation
        return data


@dataclass(frozen=True)
class GameDefinition:
    """A normalized game, ready to be played and graded."""

    game_id: str
    type: GameType
    difficulty: Difficulty
    xp_reward: int
    skills_tagged: tuple[str, ...] = ()
    time_limit: float | None = None
    items: tuple[Item, ...] = ()
    title: str | None = None
    description: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    is_active: bool = True

    @property
    def max_points(self) -> float:
        return sum(item.points for item in self.items)

    def is_tagged(self, skill: str) -> bool:
        return skill in self.skills_tagged

    def summary(self) -> dict[str, Any]:
        """Short form used in learning-path weeks."""
        return {
            "gameId": self.game_id,
            "title": self.title,
            "type": self.type.value,
            "difficulty": self.difficulty.value,
        }

    def to_dict(self) -> dict[str, Any]:
        items_key = "scenarios" if self.type == GameType.SIMULATION else "questions"
        data: dict[str, Any] = {
            "gameId": self.game_id,
            "title": self.title,
            "description": self.description,
            "type": self.type.value,
            "difficulty": self.difficulty.value,
            "skillsTagged": list(self.skills_tagged),
            "xpReward": self.xp_reward,
            items_key: [item.to_dict() for item in self.items],
            "metadata": dict(self.metadata),
            "isActive": self.is_active,
        }
        if self.time_limit is not None:
            data["timeLimit"] = self.time_limit
        return data


@dataclass(frozen=True)
class TestCaseResult:
    """Outcome of the coding heuristic for one test case."""

    __test__ = False

    test_case: int  # 1-based
    passed: bool
    input: Any = None
    expected_output: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "testCase": self.test_case,
            "passed": self.passed,
            "input": self.input,
            "expectedOutput": self.expected_output,
        }


@dataclass(frozen=True)
class ItemOutcome:
    """Per-item breakdown entry of a GameResult."""

    item_id: str | int
    item_type: ItemType | str
    is_correct: bool
    points: int | float
    user_answer: Any = None
    expected: Any = None
    test_results: tuple[TestCaseResult, ...] = ()
    explanation: str | None = None

    @property
    def tests_passed(self) -> int:
        return sum(1 for t in self.test_results if t.passed)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "itemId": self.item_id,
            "itemType": item_type_name(self.item_type),
            "isCorrect": self.is_correct,
            "points": self.points,
            "userAnswer": self.user_answer,
            "expected": self.expected,
        }
        if self.item_type == ItemType.CODING:
            data["testResults"] = {
                "passed": self.tests_passed,
                "total": len(self.test_results) or 1,
                "tests": [t.to_dict() for t in self.test_results],
            }
        if self.explanation is not None:
            data["explanation"] = self.explanation
        return data


@dataclass(frozen=True)
class GameResult:
    """Graded outcome of one submission."""

    game_id: str
    game_type: GameType
    score: int
    accuracy: int
    correct_count: int
    total_items: int
    xp_earned: int
    time_spent: float
    feedback: str
    time_bonus: float = 1.0
    items: tuple[ItemOutcome, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "gameId": self.game_id,
            "gameType": self.game_type.value,
            "score": self.score,
            "accuracy": self.accuracy,
            "correctCount": self.correct_count,
            "totalItems": self.total_items,
            "xpEarned": self.xp_earned,
            "timeSpent": self.time_spent,
            "timeBonus": self.time_bonus,
            "results": [o.to_dict() for o in self.items],
            "feedback": self.feedback,
        }
