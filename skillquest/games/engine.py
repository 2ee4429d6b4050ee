"""
Game Result Processor.

Turns raw game documents into normalized GameDefinitions and grades
submissions against them:

1. load_game(): validate and normalize a raw definition
2. process_result(): evaluate each item with its registered evaluator,
   aggregate score/accuracy, apply the time bonus and pick feedback

The engine is stateless; one instance can be shared freely.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from skillquest.core.errors import ValidationError
from skillquest.core.scoring import (
    FeedbackTier,
    feedback_tier,
    percentage,
    round_half_up,
    time_bonus,
    xp_for_result,
)
from skillquest.games import get_evaluator
from skillquest.games.models import GameDefinition, GameResult, Item, ItemOutcome, TestCase
from skillquest.games.schemas import RawGame, RawItem
from skillquest.games.types import (
    DEFAULT_ITEM_POINTS,
    DEFAULT_XP_REWARD,
    QUIZ_ITEM_TYPES,
    Difficulty,
    GameType,
    ItemType,
)

# ============================================================================
# FEEDBACK MESSAGES
# ============================================================================

FEEDBACK_TEMPLATES: dict[GameType, dict[FeedbackTier, str]] = {
    GameType.QUIZ: {
        FeedbackTier.EXCELLENT: "Excellent! You got {correct}/{total} correct. Outstanding performance!",
        FeedbackTier.GOOD: "Good job! You got {correct}/{total} correct. Keep practicing!",
        FeedbackTier.FAIR: "Not bad! You got {correct}/{total} correct. Review the concepts and try again.",
        FeedbackTier.NEEDS_IMPROVEMENT: (
            "You got {correct}/{total} correct. Don't give up! Review the material and practice more."
        ),
    },
    GameType.CODING: {
        FeedbackTier.EXCELLENT: "Brilliant coding! {correct}/{total} challenges solved correctly.",
        FeedbackTier.GOOD: "Well done! {correct}/{total} challenges solved. Keep coding!",
        FeedbackTier.FAIR: "{correct}/{total} challenges solved. You're getting there, revisit the failing ones.",
        FeedbackTier.NEEDS_IMPROVEMENT: (
            "{correct}/{total} challenges solved. Practice more to improve your coding skills."
        ),
    },
    GameType.SIMULATION: {
        FeedbackTier.EXCELLENT: "Excellent decision-making! {correct}/{total} scenarios handled correctly.",
        FeedbackTier.GOOD: "Good choices! {correct}/{total} scenarios correct.",
        FeedbackTier.FAIR: "{correct}/{total} scenarios correct. Some calls were close, review the explanations.",
        FeedbackTier.NEEDS_IMPROVEMENT: (
            "{correct}/{total} scenarios correct. Think through each scenario carefully."
        ),
    },
}


def build_feedback(game_type: GameType, accuracy: float, correct: int, total: int) -> str:
    """Feedback message for the accuracy tier, embedding correct/total."""
    template = FEEDBACK_TEMPLATES[game_type][feedback_tier(accuracy)]
    return template.format(correct=correct, total=total)


class GameEngine:
    """
    Loads game definitions and grades submissions.

    Item evaluation is dispatched through the evaluator registry keyed by
    ItemType, one evaluator per item variant.
    """

    # ========================================================================
    # LOADING
    # ========================================================================

    def load_game(self, raw: Mapping[str, Any] | GameDefinition) -> GameDefinition:
        """
        Validate and normalize a raw game definition.

        Args:
            raw: Game document (camelCase keys) or an already loaded definition

        Returns:
            Immutable GameDefinition with defaults applied

        Raises:
            ValidationError: Missing gameId, unsupported game type or malformed items
        """
        if isinstance(raw, GameDefinition):
            return raw

        if not isinstance(raw, Mapping) or not raw.get("gameId"):
            raise ValidationError("Invalid game data: missing gameId", field="gameId")

        game_type = self._parse_game_type(raw.get("type"))

        try:
            doc = RawGame.model_validate({**raw, "gameId": str(raw["gameId"])})
        except PydanticValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            raise ValidationError(
                f"Invalid game data for {raw['gameId']}: {location}: {first['msg']}",
                field=location,
            ) from e

        difficulty = self._parse_difficulty(doc.difficulty)
        items_key = "questions" if doc.questions is not None else "scenarios"
        items = tuple(
            self._build_item(game_type, raw_item, index, items_key)
            for index, raw_item in enumerate(doc.raw_items)
        )

        game = GameDefinition(
            game_id=doc.game_id,
            type=game_type,
            difficulty=difficulty,
            xp_reward=doc.xp_reward or DEFAULT_XP_REWARD[game_type],
            skills_tagged=tuple(dict.fromkeys(doc.skills_tagged or [])),
            time_limit=doc.time_limit,
            items=items,
            title=doc.title,
            description=doc.description,
            metadata=dict(doc.metadata or {}),
            is_active=doc.is_active,
        )
        logger.debug(
            f"Loaded game {game.game_id}: type={game.type.value}, "
            f"items={len(game.items)}, skills={list(game.skills_tagged)}"
        )
        return game

    # ========================================================================
    # GRADING
    # ========================================================================

    def process_result(
        self,
        game: Mapping[str, Any] | GameDefinition,
        answers: Sequence[Any] | None,
        time_spent: float,
    ) -> GameResult:
        """
        Grade a submission.

        Args:
            game: Loaded definition or raw document
            answers: Answers aligned by index with the game's items
            time_spent: Seconds taken, as reported by the caller

        Returns:
            GameResult with rounded score/accuracy and XP earned

        Raises:
            ValidationError: Malformed definition, answers or time_spent
        """
        game = self.load_game(game)
        answers = self._normalize_answers(answers)
        time_spent = self._normalize_time(time_spent)

        outcomes = []
        for index, item in enumerate(game.items):
            answer = answers[index] if index < len(answers) else None
            outcomes.append(self._evaluate_item(item, answer))

        total_items = len(outcomes)
        correct_count = sum(1 for o in outcomes if o.is_correct)
        points_awarded = sum(o.points for o in outcomes)

        accuracy = percentage(correct_count, total_items)
        score = percentage(points_awarded, game.max_points)
        bonus = time_bonus(game.time_limit, time_spent)

        result = GameResult(
            game_id=game.game_id,
            game_type=game.type,
            score=round_half_up(score),
            accuracy=round_half_up(accuracy),
            correct_count=correct_count,
            total_items=total_items,
            xp_earned=xp_for_result(game.xp_reward, accuracy, bonus),
            time_spent=time_spent,
            feedback=build_feedback(game.type, accuracy, correct_count, total_items),
            time_bonus=bonus,
            items=tuple(outcomes),
        )
        logger.info(
            f"Graded {game.game_id}: {correct_count}/{total_items} correct, "
            f"score={result.score}, xp={result.xp_earned} (bonus x{bonus})"
        )
        return result

    # ========================================================================
    # PRIVATE HELPER METHODS
    # ========================================================================

    def _evaluate_item(self, item: Item, answer: Any) -> ItemOutcome:
        evaluator = get_evaluator(item.item_type)
        if evaluator is None:
            return ItemOutcome(
                item_id=item.item_id,
                item_type=item.item_type,
                is_correct=False,
                points=0,
                user_answer=answer,
                expected=item.correct_answer,
                explanation=item.explanation,
            )

        check = evaluator.check(item, answer)
        return ItemOutcome(
            item_id=item.item_id,
            item_type=item.item_type,
            is_correct=check.correct,
            points=item.points if check.correct else 0,
            user_answer=check.user_answer,
            expected=check.expected,
            test_results=check.test_results,
            explanation=item.explanation,
        )

    def _parse_game_type(self, value: Any) -> GameType:
        try:
            return GameType(value)
        except ValueError:
            raise ValidationError(f"Unsupported game type: {value}", field="type") from None

    def _parse_difficulty(self, value: str | None) -> Difficulty:
        if not value:
            return Difficulty.BEGINNER
        try:
            return Difficulty(value)
        except ValueError:
            raise ValidationError(f"Unsupported difficulty: {value}", field="difficulty") from None

    def _resolve_item_type(self, game_type: GameType, raw_item: RawItem) -> ItemType | str:
        """Item type for a raw item; an unknown quiz question type is kept as its raw string."""
        if game_type == GameType.CODING:
            return ItemType.CODING
        if game_type == GameType.SIMULATION:
            return ItemType.SCENARIO

        try:
            item_type = ItemType((raw_item.type or "").lower())
        except ValueError:
            item_type = None
        if item_type not in QUIZ_ITEM_TYPES:
            return raw_item.type or ""
        return item_type

    def _build_item(self, game_type: GameType, raw_item: RawItem, index: int, items_key: str) -> Item:
        item_type = self._resolve_item_type(game_type, raw_item)
        # 0 points falls back to the type default, like an absent value
        points = raw_item.points or DEFAULT_ITEM_POINTS[game_type]
        if game_type == GameType.QUIZ:
            prompt = raw_item.question or raw_item.description
        else:
            prompt = raw_item.description or raw_item.question

        item = Item(
            item_type=item_type,
            item_id=raw_item.id if raw_item.id is not None else index,
            points=points,
            prompt=prompt,
            options=tuple(raw_item.options or ()),
            correct_answer=raw_item.correct_answer,
            test_cases=tuple(
                TestCase(input=tc.input, expected_output=tc.expected_output)
                for tc in raw_item.test_cases or ()
            ),
            expected_pattern=raw_item.expected_pattern,
            correct_choice=raw_item.correct_choice,
            explanation=raw_item.explanation,
        )

        evaluator = get_evaluator(item_type)
        if evaluator is None:
            logger.warning(
                f"{items_key}[{index}] has unsupported question type {item_type!r}; "
                f"it will always be scored incorrect"
            )
        elif not evaluator.validate(item):
            logger.warning(
                f"{items_key}[{index}] ({item.type_name}) is missing its answer key; "
                f"it can never be scored correct"
            )
        return item

    def _normalize_answers(self, answers: Any) -> Sequence[Any]:
        if answers is None:
            return []
        if isinstance(answers, (str, bytes)) or not isinstance(answers, Sequence):
            raise ValidationError("Answers must be a list aligned with the game's items", field="answers")
        return answers

    def _normalize_time(self, time_spent: Any) -> float:
        if isinstance(time_spent, bool) or not isinstance(time_spent, (int, float)) or time_spent < 0:
            raise ValidationError(f"Invalid timeSpent: {time_spent!r}", field="timeSpent")
        return time_spent


# Shared stateless instance for the module-level API
_engine = GameEngine()


def load_game(raw: Mapping[str, Any] | GameDefinition) -> GameDefinition:
    """Validate and normalize a raw game definition."""
    return _engine.load_game(raw)


def process_result(
    game: Mapping[str, Any] | GameDefinition,
    answers: Sequence[Any] | None,
    time_spent: float,
) -> GameResult:
    """Grade a submission against a game."""
    return _engine.process_result(game, answers, time_spent)
