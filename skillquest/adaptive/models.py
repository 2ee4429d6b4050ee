"""
Derived records for gap analysis, recommendations and learning paths.

None of these are persisted; they're recomputed from LearnerProgress and
the game catalog on each request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from skillquest.games.models import GameDefinition

GENERAL_FOCUS = "General Practice"


@dataclass(frozen=True)
class SkillGap:
    """A skill below the competence bar."""

    skill: str
    current_accuracy: float
    current_attempts: int
    gap_magnitude: float
    priority: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "skill": self.skill,
            "currentAccuracy": self.current_accuracy,
            "currentAttempts": self.current_attempts,
            "gap": self.gap_magnitude,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class Recommendation:
    """A catalog game with its relevance for this learner."""

    game: GameDefinition
    relevance_score: float
    skill: str
    source: str  # 'gap' or 'variety'

    @property
    def game_id(self) -> str:
        return self.game.game_id

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.game.summary(),
            "skillsTagged": list(self.game.skills_tagged),
            "relevanceScore": self.relevance_score,
            "skill": self.skill,
            "source": self.source,
        }


@dataclass(frozen=True)
class LearningPathWeek:
    """One week of the study plan."""

    week: int  # 1-based
    focus: str
    games: tuple[GameDefinition, ...]
    goals: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "week": self.week,
            "focus": self.focus,
            "games": [g.summary() for g in self.games],
            "goals": list(self.goals),
        }


@dataclass
class LearningPathReport:
    """Everything the learning-path view needs in one record."""

    skill_gaps: list[SkillGap] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)
    learning_path: list[LearningPathWeek] = field(default_factory=list)
    current_level: int = 1
    target_level: int = 3
    estimated_weeks: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "skillGaps": [g.to_dict() for g in self.skill_gaps],
            "recommendations": [r.to_dict() for r in self.recommendations],
            "learningPath": [w.to_dict() for w in self.learning_path],
            "currentLevel": self.current_level,
            "targetLevel": self.target_level,
            "estimatedWeeks": self.estimated_weeks,
        }
