"""
Raw game payload models.

Game definitions arrive as plain JSON documents from the catalog store.
These pydantic models check the payload's shape before the engine turns it
into an immutable GameDefinition. Unknown keys are kept (extra="allow") so
that catalog documents can carry presentation fields the engine ignores.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawTestCase(BaseModel):
    """A coding challenge test case as stored."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    input: Any = None
    expected_output: Any = Field(None, alias="expectedOutput")


class RawItem(BaseModel):
    """A question, challenge or scenario as stored."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | int | None = None
    type: str | None = Field(None, description="Quiz question type: multiple-choice, true-false, text")
    question: str | None = None
    description: str | None = None
    options: list[Any] | None = None
    correct_answer: Any = Field(None, alias="correctAnswer")
    correct_choice: Any = Field(None, alias="correctChoice")
    test_cases: list[RawTestCase] | None = Field(None, alias="testCases")
    expected_pattern: str | None = Field(None, alias="expectedPattern")
    points: int | float | None = Field(None, ge=0, description="Points for a correct answer")
    explanation: str | None = None


class RawGame(BaseModel):
    """A game definition document as stored."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    game_id: str = Field(..., alias="gameId", min_length=1)
    type: str
    title: str | None = None
    description: str | None = None
    difficulty: str | None = None
    skills_tagged: list[str] | None = Field(None, alias="skillsTagged")
    xp_reward: int | None = Field(None, alias="xpReward", ge=0)
    time_limit: float | None = Field(None, alias="timeLimit", ge=0, description="Seconds")
    questions: list[RawItem] | None = None
    scenarios: list[RawItem] | None = None
    metadata: dict[str, Any] | None = None
    is_active: bool = Field(True, alias="isActive")

    @property
    def raw_items(self) -> list[RawItem]:
        if self.questions is not None:
            return self.questions
        if self.scenarios is not None:
            return self.scenarios
        return []
