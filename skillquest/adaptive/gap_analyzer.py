"""
Skill Gap Analyzer.

A skill is a gap while it is below the competence bar:
    accuracy < 70  OR  attempts < 10

Gap magnitude adds the accuracy-point deficit and the attempt deficit
directly on one scale:
    gap = max(70 - accuracy, 0) + max(10 - attempts, 0)

Priority favours low accuracy and little practice:
    priority = (100 - accuracy) * 0.6 + max(0, 10 - attempts) * 4
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger

from skillquest.adaptive.models import SkillGap
from skillquest.learning.models import LearnerProgress, SkillState


@dataclass
class GapThresholds:
    """The competence bar a skill must clear to stop being a gap."""
    min_accuracy: float = 70.0
    min_attempts: int = 10
    accuracy_weight: float = 0.6
    attempt_weight: float = 4.0

    @classmethod
    def from_settings(cls, settings: Any) -> GapThresholds:
        return cls(**settings.get_gap_thresholds())

    def is_gap(self, state: SkillState) -> bool:
        return state.accuracy < self.min_accuracy or state.attempts < self.min_attempts

    def is_strong(self, state: SkillState) -> bool:
        return not self.is_gap(state)


class SkillGapAnalyzer:
    """Derive ranked skill gaps from a learner's current skill statistics."""

    def __init__(self, thresholds: GapThresholds | None = None):
        self.thresholds = thresholds or GapThresholds()

    def analyze(self, progress: LearnerProgress) -> list[SkillGap]:
        """
        Find every skill below the bar, highest priority first.

        Ties keep the order skills appear in `progress.skills`.
        """
        gaps = [
            self._build_gap(skill, state)
            for skill, state in progress.skills.items()
            if self.thresholds.is_gap(state)
        ]
        ranked = sorted(gaps, key=lambda g: g.priority, reverse=True)

        if ranked:
            logger.debug(f"Skill gaps: {[(g.skill, round(g.priority, 1)) for g in ranked]}")
        return ranked

    def priority(self, accuracy: float, attempts: int) -> float:
        attempt_deficit = max(0, self.thresholds.min_attempts - attempts)
        return (100 - accuracy) * self.thresholds.accuracy_weight + attempt_deficit * self.thresholds.attempt_weight

    def _build_gap(self, skill: str, state: SkillState) -> SkillGap:
        magnitude = (
            max(self.thresholds.min_accuracy - state.accuracy, 0)
            + max(self.thresholds.min_attempts - state.attempts, 0)
        )
        return SkillGap(
            skill=skill,
            current_accuracy=state.accuracy,
            current_attempts=state.attempts,
            gap_magnitude=magnitude,
            priority=self.priority(state.accuracy, state.attempts),
        )


def analyze_skill_gaps(progress: LearnerProgress) -> list[SkillGap]:
    """Ranked skill gaps using the default competence bar."""
    return SkillGapAnalyzer().analyze(progress)
