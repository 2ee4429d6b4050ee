"""
Integration tests for the full learning flow.

Catalog templates -> graded submission -> tracked progress -> learning path,
with progress persisted through its dict form between plays.
"""

from datetime import datetime, timedelta

import pytest

from skillquest import (
    analyze_skill_gaps,
    apply_result,
    build_learning_path_report,
    process_result,
)
from skillquest.analytics import learner_summary
from skillquest.games.catalog import find_game, load_catalog
from skillquest.learning.models import LearnerProgress


@pytest.fixture
def catalog(games_dir):
    return load_catalog(games_dir)


class TestCatalog:
    def test_bundled_templates_load(self, catalog):
        assert {g.game_id for g in catalog} == {
            "coding-python-functions",
            "quiz-dsa-basics",
            "quiz-ml-advanced",
            "simulation-incident-response",
        }

    def test_broken_template_skipped(self, tmp_path):
        (tmp_path / "a.json").write_text('{"gameId": "ok", "type": "quiz"}')
        (tmp_path / "b.json").write_text("{not json")
        (tmp_path / "c.json").write_text('[{"gameId": "x", "type": "puzzle"}, {"gameId": "y", "type": "coding"}]')

        assert [g.game_id for g in load_catalog(tmp_path)] == ["ok", "y"]

    def test_missing_directory(self, tmp_path):
        assert load_catalog(tmp_path / "nope") == []


class TestLearningFlow:
    def test_play_track_and_plan(self, catalog):
        day_one = datetime(2024, 5, 1, 9, 0)
        quiz = find_game(catalog, "quiz-dsa-basics")

        result = process_result(quiz, ["O(log n)", False, "a stack", "Linked list"], 50)
        assert result.correct_count == 3
        assert result.time_bonus == 1.2
        assert result.xp_earned == 9  # round(10 * 0.75 * 1.2)

        progress = apply_result(LearnerProgress.create(), quiz, result, now=day_one)
        stored = progress.to_dict()

        # Next day, reload from the stored document and play again
        progress = LearnerProgress.from_dict(stored)
        coding = find_game(catalog, "coding-python-functions")
        result = process_result(coding, [{"code": "def f(xs): return sum(xs)"}, "s[::-1]"], 700)
        assert result.correct_count == 1
        assert result.score == 50

        progress = apply_result(progress, coding, result, now=day_one + timedelta(days=1))

        assert progress.streak == 2
        assert progress.skills["DSA"].attempts == 2
        assert progress.skills["Backend"].attempts == 1
        assert progress.xp == 9 + result.xp_earned
        assert progress.played_game_ids == {"quiz-dsa-basics", "coding-python-functions"}

        report = build_learning_path_report(progress, catalog)
        recommended = {r.game_id for r in report.recommendations}
        assert recommended.isdisjoint(progress.played_game_ids)
        assert {g.skill for g in report.skill_gaps} == {g.skill for g in analyze_skill_gaps(progress)}
        assert report.estimated_weeks == len(report.learning_path)

    def test_summary_after_play(self, catalog):
        now = datetime(2024, 5, 1, 9, 0)
        game = find_game(catalog, "simulation-incident-response")
        result = process_result(game, [1, 0], 30)
        progress = apply_result(LearnerProgress.create(), game, result, now=now)

        summary = learner_summary(progress, now=now + timedelta(hours=1))
        assert summary["total_games"] == 1
        assert summary["score_trends"] == [{"date": "2024-05-01", "average_score": 100.0}]
        assert summary["streak"] == 1
