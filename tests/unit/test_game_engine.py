"""
Unit tests for the game engine: loading definitions and grading submissions.
"""

import pytest

from skillquest.core.errors import ValidationError
from skillquest.games.engine import GameEngine, load_game, process_result
from skillquest.games.models import GameDefinition
from skillquest.games.types import Difficulty, GameType, ItemType


@pytest.fixture
def engine():
    return GameEngine()


class TestLoadGame:
    def test_missing_game_id(self, engine):
        with pytest.raises(ValidationError) as exc:
            engine.load_game({"type": "quiz", "questions": []})
        assert exc.value.field == "gameId"

    def test_unsupported_type(self, engine):
        with pytest.raises(ValidationError) as exc:
            engine.load_game({"gameId": "g1", "type": "puzzle"})
        assert exc.value.field == "type"

    def test_defaults_by_type(self, engine):
        game = engine.load_game({"gameId": "g1", "type": "coding"})
        assert game.difficulty is Difficulty.BEGINNER
        assert game.xp_reward == 15
        assert game.items == ()
        assert game.skills_tagged == ()
        assert game.is_active

    def test_simulation_defaults(self, engine, simulation_game):
        del simulation_game["difficulty"]
        game = engine.load_game(simulation_game)
        assert game.xp_reward == 12
        assert [item.points for item in game.items] == [3, 3]
        assert all(item.item_type is ItemType.SCENARIO for item in game.items)

    def test_quiz_item_points_default_to_one(self, engine, mc_quiz):
        game = engine.load_game(mc_quiz)
        assert game.max_points == 4

    def test_zero_points_use_type_default(self, engine):
        game = engine.load_game({
            "gameId": "g1",
            "type": "coding",
            "questions": [{"description": "?", "testCases": [{"input": 1}], "points": 0}],
        })
        assert game.items[0].points == 5

    def test_zero_xp_reward_uses_type_default(self, engine):
        assert engine.load_game({"gameId": "g1", "type": "simulation", "xpReward": 0}).xp_reward == 12

    def test_unknown_question_type_kept(self, engine):
        game = engine.load_game({
            "gameId": "g1",
            "type": "quiz",
            "questions": [{"type": "matching", "question": "?"}, {"question": "no type"}],
        })
        assert [item.item_type for item in game.items] == ["matching", ""]
        assert game.items[0].to_dict()["type"] == "matching"

    def test_malformed_items(self, engine):
        with pytest.raises(ValidationError):
            engine.load_game({"gameId": "g1", "type": "quiz", "questions": "not a list"})

    def test_unknown_difficulty(self, engine):
        with pytest.raises(ValidationError) as exc:
            engine.load_game({"gameId": "g1", "type": "quiz", "difficulty": "expert"})
        assert exc.value.field == "difficulty"

    def test_duplicate_skills_collapsed(self, engine):
        game = engine.load_game({"gameId": "g1", "type": "quiz", "skillsTagged": ["DSA", "ML", "DSA"]})
        assert game.skills_tagged == ("DSA", "ML")

    def test_numeric_game_id_normalized(self, engine):
        assert engine.load_game({"gameId": 7, "type": "quiz"}).game_id == "7"

    def test_loading_is_idempotent(self, engine, coding_game):
        game = engine.load_game(coding_game)
        assert engine.load_game(game) is game
        assert engine.load_game(game.to_dict()) == game

    def test_item_ids_default_to_index(self, engine):
        game = engine.load_game({
            "gameId": "g1",
            "type": "quiz",
            "questions": [{"type": "true-false", "question": "?", "correctAnswer": True}],
        })
        assert game.items[0].item_id == 0


class TestProcessResult:
    def test_three_of_four_multiple_choice(self, mc_quiz):
        result = process_result(mc_quiz, ["4", "6", "Paris", "Saturn"], 30)

        assert result.score == 75
        assert result.accuracy == 75
        assert result.correct_count == 3
        assert result.total_items == 4
        assert result.xp_earned == 8
        assert result.time_bonus == 1.0
        assert "3/4" in result.feedback

    def test_no_items_scores_zero(self):
        result = process_result({"gameId": "empty", "type": "quiz"}, [], 10)
        assert result.score == 0
        assert result.accuracy == 0
        assert result.xp_earned == 0
        assert result.total_items == 0

    def test_missing_answers_are_incorrect(self, mc_quiz):
        result = process_result(mc_quiz, ["4"], 30)
        assert result.correct_count == 1
        assert [o.is_correct for o in result.items] == [True, False, False, False]

    def test_none_answers(self, mc_quiz):
        result = process_result(mc_quiz, None, 0)
        assert result.correct_count == 0

    def test_blank_answers_follow_item_rules(self):
        game = {
            "gameId": "blank",
            "type": "quiz",
            "questions": [
                {"type": "true-false", "question": "a", "correctAnswer": False},
                {"type": "text", "question": "b", "correctAnswer": "stack"},
            ],
        }
        result = process_result(game, ["", "  "], 0)
        assert result.correct_count == 2

    def test_unknown_question_type_scored_incorrect(self):
        game = {
            "gameId": "mixed",
            "type": "quiz",
            "questions": [
                {"type": "matching", "question": "a", "correctAnswer": "x"},
                {"type": "text", "question": "b", "correctAnswer": "y"},
            ],
        }
        result = process_result(game, ["x", "y"], 0)
        assert [o.is_correct for o in result.items] == [False, True]
        assert result.accuracy == 50
        assert result.to_dict()["results"][0]["itemType"] == "matching"

    def test_zero_point_items_score_like_default(self):
        game = {
            "gameId": "zero",
            "type": "quiz",
            "questions": [{"type": "text", "question": "a", "correctAnswer": "a", "points": 0}],
        }
        result = process_result(game, ["a"], 0)
        assert result.score == 100

    def test_score_uses_points_accuracy_uses_count(self):
        game = {
            "gameId": "weighted",
            "type": "quiz",
            "questions": [
                {"type": "text", "question": "a", "correctAnswer": "a", "points": 3},
                {"type": "text", "question": "b", "correctAnswer": "b", "points": 1},
            ],
        }
        result = process_result(game, ["a", "wrong"], 0)
        assert result.accuracy == 50
        assert result.score == 75

    def test_coding_game(self, coding_game):
        result = process_result(coding_game, ["def total(xs): return sum(xs)"], 60)
        assert result.game_type is GameType.CODING
        assert result.correct_count == 1
        assert result.xp_earned == 15
        assert result.to_dict()["results"][0]["testResults"]["passed"] == 2

    def test_simulation_fast_bonus(self, simulation_game):
        result = process_result(simulation_game, [1, "rollback"], 40)
        assert result.accuracy == 100
        assert result.time_bonus == 1.2
        assert result.xp_earned == 14  # round(12 * 1.0 * 1.2) = round(14.4)
        assert result.feedback.startswith("Excellent decision-making")

    def test_overtime_penalty(self, simulation_game):
        result = process_result(simulation_game, [1, "wait"], 150)
        assert result.time_bonus == 0.7
        assert result.xp_earned == 4  # round(12 * 0.5 * 0.7) = round(4.2)

    def test_scores_stay_in_range(self, mc_quiz):
        for answers in ([], ["4", "6", "Paris", "Jupiter"], ["x"] * 10):
            result = process_result(mc_quiz, answers, 0)
            assert 0 <= result.score <= 100
            assert 0 <= result.accuracy <= 100

    def test_answers_must_be_a_list(self, mc_quiz):
        with pytest.raises(ValidationError) as exc:
            process_result(mc_quiz, "4,6", 10)
        assert exc.value.field == "answers"

    @pytest.mark.parametrize("time_spent", [-1, "fast", True, None])
    def test_invalid_time_spent(self, mc_quiz, time_spent):
        with pytest.raises(ValidationError):
            process_result(mc_quiz, [], time_spent)

    def test_accepts_loaded_definition(self, mc_quiz):
        game = load_game(mc_quiz)
        assert isinstance(game, GameDefinition)
        assert process_result(game, ["4"], 0).correct_count == 1
