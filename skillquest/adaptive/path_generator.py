"""
Learning Path Generator.

Chunks ranked recommendations into weeks of 5 games. Week w focuses on the
w-th skill gap; weeks past the last gap fall back to general practice.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from loguru import logger

from skillquest.adaptive.gap_analyzer import GapThresholds, SkillGapAnalyzer
from skillquest.adaptive.models import (
    GENERAL_FOCUS,
    LearningPathReport,
    LearningPathWeek,
    Recommendation,
    SkillGap,
)
from skillquest.adaptive.recommender import GameRecommender, RecommenderConfig
from skillquest.games.models import GameDefinition
from skillquest.learning.models import LearnerProgress


@dataclass
class PathConfig:
    """Configuration for weekly plan generation."""
    games_per_week: int = 5
    target_level_offset: int = 2

    @classmethod
    def from_settings(cls, settings: Any) -> PathConfig:
        return cls(**settings.get_path_config())


class LearningPathGenerator:
    """Build a week-by-week plan from recommendations and gaps."""

    def __init__(self, config: PathConfig | None = None):
        self.config = config or PathConfig()

    def week_count(self, recommendations: list[Recommendation]) -> int:
        return math.ceil(len(recommendations) / self.config.games_per_week)

    def generate(
        self,
        progress: LearnerProgress,
        recommendations: list[Recommendation],
        gaps: list[SkillGap],
    ) -> list[LearningPathWeek]:
        """
        Weekly plan; empty when there are no recommendations.

        `progress` is accepted for parity with the other adaptive stages;
        the plan itself depends only on recommendations and gaps.
        """
        per_week = self.config.games_per_week
        weeks = []

        for index in range(self.week_count(recommendations)):
            chunk = recommendations[index * per_week:(index + 1) * per_week]
            focus = gaps[index].skill if index < len(gaps) else GENERAL_FOCUS
            weeks.append(
                LearningPathWeek(
                    week=index + 1,
                    focus=focus,
                    games=tuple(rec.game for rec in chunk),
                    goals=(
                        f"Complete {len(chunk)} games",
                        f"Improve {focus} skills",
                        "Maintain daily streak",
                    ),
                )
            )

        logger.debug(f"Learning path: {len(weeks)} weeks at level {progress.level}")
        return weeks


def generate_learning_path(
    progress: LearnerProgress,
    recommendations: list[Recommendation],
    gaps: list[SkillGap],
) -> list[LearningPathWeek]:
    """Weekly plan with the default 5 games per week."""
    return LearningPathGenerator().generate(progress, recommendations, gaps)


def build_learning_path_report(
    progress: LearnerProgress,
    catalog: Iterable[GameDefinition | Mapping[str, Any]],
    *,
    thresholds: GapThresholds | None = None,
    recommender_config: RecommenderConfig | None = None,
    path_config: PathConfig | None = None,
) -> LearningPathReport:
    """
    Run gap analysis, recommendation and path generation in sequence.

    Args:
        progress: Learner progress
        catalog: Available games (definitions or raw documents)
        thresholds: Competence bar (defaults to 70% / 10 attempts)
        recommender_config: Recommendation sizes
        path_config: Plan sizes

    Returns:
        LearningPathReport with the current and target level
    """
    generator = LearningPathGenerator(path_config)

    gaps = SkillGapAnalyzer(thresholds).analyze(progress)
    recommendations = GameRecommender(recommender_config, thresholds).recommend(progress, catalog, gaps)
    weeks = generator.generate(progress, recommendations, gaps)

    return LearningPathReport(
        skill_gaps=gaps,
        recommendations=recommendations,
        learning_path=weeks,
        current_level=progress.level,
        target_level=progress.level + generator.config.target_level_offset,
        estimated_weeks=generator.week_count(recommendations),
    )
