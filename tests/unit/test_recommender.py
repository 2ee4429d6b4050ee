"""
Unit tests for GameRecommender.
"""

from datetime import datetime

import pytest

from skillquest.adaptive.gap_analyzer import analyze_skill_gaps
from skillquest.adaptive.models import SkillGap
from skillquest.adaptive.recommender import GameRecommender, RecommenderConfig, recommend_games
from skillquest.games.engine import load_game
from skillquest.learning.models import GameHistoryEntry, LearnerProgress, SkillState


def game(game_id: str, skills: list[str], difficulty: str = "beginner", **extra) -> dict:
    return {"gameId": game_id, "type": "quiz", "difficulty": difficulty, "skillsTagged": skills, **extra}


def gap(skill: str, priority: float) -> SkillGap:
    return SkillGap(skill=skill, current_accuracy=0.0, current_attempts=0, gap_magnitude=80, priority=priority)


def played(*game_ids: str) -> list[GameHistoryEntry]:
    return [
        GameHistoryEntry(
            game_id=gid,
            game_type="quiz",
            score=50,
            accuracy=50,
            time_spent=10,
            difficulty="beginner",
            completed_at=datetime(2024, 1, 1),
        )
        for gid in game_ids
    ]


class TestRelevance:
    def test_gap_priority_added(self):
        recs = recommend_games(LearnerProgress(level=5), [game("g1", ["DSA"], "intermediate")], [gap("DSA", 40)])
        assert recs[0].relevance_score == 140

    def test_advanced_penalized_below_level_five(self):
        recs = recommend_games(LearnerProgress(level=4), [game("g1", ["DSA"], "advanced")], [gap("DSA", 10)])
        assert recs[0].relevance_score == 80

    def test_beginner_penalized_above_level_ten(self):
        recs = recommend_games(LearnerProgress(level=11), [game("g1", ["DSA"], "beginner")], [gap("DSA", 10)])
        assert recs[0].relevance_score == 90


class TestFiltering:
    def test_played_and_inactive_games_skipped(self):
        progress = LearnerProgress(game_history=played("g1"))
        catalog = [
            game("g1", ["DSA"]),
            game("g2", ["DSA"], isActive=False),
            game("g3", ["DSA"]),
            game("g4", ["ML"]),
        ]
        recs = recommend_games(progress, catalog, [gap("DSA", 50)])
        assert [r.game_id for r in recs] == ["g3"]

    def test_top_three_per_gap(self):
        catalog = [game(f"g{i}", ["DSA"]) for i in range(5)]
        recs = recommend_games(LearnerProgress(), catalog, [gap("DSA", 50)])
        assert [r.game_id for r in recs] == ["g0", "g1", "g2"]

    def test_invalid_catalog_entries_skipped(self):
        catalog = [{"type": "quiz"}, game("g1", ["DSA"])]
        recs = recommend_games(LearnerProgress(), catalog, [gap("DSA", 50)])
        assert [r.game_id for r in recs] == ["g1"]

    def test_accepts_loaded_definitions(self):
        catalog = [load_game(game("g1", ["DSA"]))]
        assert recommend_games(LearnerProgress(), catalog, [gap("DSA", 1)])[0].game_id == "g1"


class TestVariety:
    def test_strong_skill_gets_advanced_games(self):
        progress = LearnerProgress(level=6, skills={"DSA": SkillState(accuracy=85.0, attempts=12)})
        catalog = [
            game("easy", ["DSA"], "beginner"),
            game("adv1", ["DSA"], "advanced"),
            game("adv2", ["DSA"], "advanced"),
            game("adv3", ["DSA"], "advanced"),
        ]
        recs = recommend_games(progress, catalog, analyze_skill_gaps(progress))
        assert [(r.game_id, r.relevance_score, r.source) for r in recs] == [
            ("adv1", 50, "variety"),
            ("adv2", 50, "variety"),
        ]


class TestMerge:
    def test_same_game_from_two_gaps_keeps_later_score(self):
        catalog = [game("shared", ["DSA", "ML"], "intermediate")]
        recs = recommend_games(LearnerProgress(), catalog, [gap("DSA", 60), gap("ML", 20)])

        assert len(recs) == 1
        assert recs[0].relevance_score == 120
        assert recs[0].skill == "ML"

    def test_variety_overwrites_gap_entry(self):
        progress = LearnerProgress(
            skills={"DSA": SkillState(accuracy=30.0, attempts=2), "ML": SkillState(accuracy=90.0, attempts=20)}
        )
        catalog = [game("adv", ["DSA", "ML"], "advanced")]
        recs = recommend_games(progress, catalog, analyze_skill_gaps(progress))
        assert [(r.game_id, r.relevance_score) for r in recs] == [("adv", 50)]

    def test_sorted_descending_and_capped(self):
        catalog = [game(f"{skill}-{i}", [skill]) for skill in ("DSA", "ML", "DBMS", "Aptitude") for i in range(3)]
        gaps = [gap("DSA", 10), gap("ML", 40), gap("DBMS", 30), gap("Aptitude", 20)]
        recs = recommend_games(LearnerProgress(), catalog, gaps)

        assert len(recs) == 10
        scores = [r.relevance_score for r in recs]
        assert scores == sorted(scores, reverse=True)
        assert recs[0].game_id == "ML-0"

    def test_custom_config(self):
        catalog = [game(f"g{i}", ["DSA"]) for i in range(5)]
        recommender = GameRecommender(RecommenderConfig(per_gap=5, max_results=4))
        assert len(recommender.recommend(LearnerProgress(), catalog, [gap("DSA", 1)])) == 4

    @pytest.mark.parametrize("catalog", [[], [game("g1", ["Rust"])]])
    def test_nothing_to_recommend(self, catalog):
        assert recommend_games(LearnerProgress(), catalog, [gap("DSA", 10)]) == []
