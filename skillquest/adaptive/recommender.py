"""
Game Recommender.

Ranks unplayed catalog games for a learner in two passes:

1. Gap pass: for each skill gap (already priority-ordered), score active
   unplayed games tagged with that skill and keep the top 3:
       relevance = 100
                   - 30 if advanced and level < 5
                   - 20 if beginner and level > 10
                   + gap.priority
2. Variety pass: for each strong skill, the first 2 active unplayed
   advanced games tagged with it, at a flat relevance of 50.

Candidates are merged by game id (a later pass overwrites an earlier entry
for the same game but keeps its original position), sorted by relevance
and truncated to 10. Scores are raw arithmetic with no floor.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from loguru import logger

from skillquest.adaptive.gap_analyzer import GapThresholds
from skillquest.adaptive.models import Recommendation, SkillGap
from skillquest.core.errors import ValidationError
from skillquest.games.engine import load_game
from skillquest.games.models import GameDefinition
from skillquest.games.types import Difficulty
from skillquest.learning.models import LearnerProgress

BASE_RELEVANCE = 100.0
ADVANCED_TOO_EARLY_PENALTY = 30.0
BEGINNER_TOO_LATE_PENALTY = 20.0
ADVANCED_MIN_LEVEL = 5
BEGINNER_MAX_LEVEL = 10
VARIETY_RELEVANCE = 50.0


@dataclass
class RecommenderConfig:
    """Configuration for recommendation sizes."""
    per_gap: int = 3
    per_strong_skill: int = 2
    max_results: int = 10

    @classmethod
    def from_settings(cls, settings: Any) -> RecommenderConfig:
        return cls(**settings.get_recommendation_config())


def relevance_score(game: GameDefinition, level: int, gap: SkillGap) -> float:
    """Relevance of a game for closing one skill gap at the learner's level."""
    score = BASE_RELEVANCE
    if game.difficulty == Difficulty.ADVANCED and level < ADVANCED_MIN_LEVEL:
        score -= ADVANCED_TOO_EARLY_PENALTY
    if game.difficulty == Difficulty.BEGINNER and level > BEGINNER_MAX_LEVEL:
        score -= BEGINNER_TOO_LATE_PENALTY
    if game.is_tagged(gap.skill):
        score += gap.priority
    return score


class GameRecommender:
    """Recommend catalog games against skill gaps and strong skills."""

    def __init__(
        self,
        config: RecommenderConfig | None = None,
        thresholds: GapThresholds | None = None,
    ):
        self.config = config or RecommenderConfig()
        self.thresholds = thresholds or GapThresholds()

    def recommend(
        self,
        progress: LearnerProgress,
        catalog: Iterable[GameDefinition | Mapping[str, Any]],
        gaps: list[SkillGap],
    ) -> list[Recommendation]:
        """
        Ranked, de-duplicated recommendations (at most max_results).

        Args:
            progress: Learner progress (history marks games as played)
            catalog: Games as loaded definitions or raw documents
            gaps: Skill gaps, highest priority first

        Returns:
            Recommendations sorted by relevance, descending
        """
        games = self._load_catalog(catalog)
        played = progress.played_game_ids
        available = [g for g in games if g.is_active and g.game_id not in played]

        candidates: list[Recommendation] = []
        candidates.extend(self._gap_candidates(progress.level, available, gaps))
        candidates.extend(self._variety_candidates(progress, available))

        merged: dict[str, Recommendation] = {}
        for candidate in candidates:
            merged[candidate.game_id] = candidate

        ranked = sorted(merged.values(), key=lambda r: r.relevance_score, reverse=True)
        result = ranked[: self.config.max_results]

        logger.debug(
            f"Recommendations: {len(candidates)} candidates, {len(merged)} unique, "
            f"returning {len(result)}"
        )
        return result

    def _gap_candidates(
        self, level: int, available: list[GameDefinition], gaps: list[SkillGap]
    ) -> list[Recommendation]:
        candidates = []
        for gap in gaps:
            scored = [
                Recommendation(
                    game=game,
                    relevance_score=relevance_score(game, level, gap),
                    skill=gap.skill,
                    source="gap",
                )
                for game in available
                if game.is_tagged(gap.skill)
            ]
            scored.sort(key=lambda r: r.relevance_score, reverse=True)
            candidates.extend(scored[: self.config.per_gap])
        return candidates

    def _variety_candidates(
        self, progress: LearnerProgress, available: list[GameDefinition]
    ) -> list[Recommendation]:
        candidates = []
        strong_skills = [s for s, state in progress.skills.items() if self.thresholds.is_strong(state)]
        for skill in strong_skills:
            advanced = [
                game for game in available
                if game.is_tagged(skill) and game.difficulty == Difficulty.ADVANCED
            ]
            candidates.extend(
                Recommendation(game=game, relevance_score=VARIETY_RELEVANCE, skill=skill, source="variety")
                for game in advanced[: self.config.per_strong_skill]
            )
        return candidates

    def _load_catalog(
        self, catalog: Iterable[GameDefinition | Mapping[str, Any]]
    ) -> list[GameDefinition]:
        games = []
        for entry in catalog:
            try:
                games.append(load_game(entry))
            except ValidationError as e:
                logger.warning(f"Skipping invalid catalog entry: {e}")
        return games


def recommend_games(
    progress: LearnerProgress,
    catalog: Iterable[GameDefinition | Mapping[str, Any]],
    gaps: list[SkillGap],
) -> list[Recommendation]:
    """Ranked recommendations with the default configuration."""
    return GameRecommender().recommend(progress, catalog, gaps)
