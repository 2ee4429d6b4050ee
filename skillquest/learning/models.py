"""
Learner progress records.

LearnerProgress is the long-lived state the proficiency tracker folds game
results into. It is owned by one learner and persisted by the caller; dict
conversion uses the stored profile's camelCase keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from skillquest.core.errors import ValidationError

# Skills every new learner profile starts with
DEFAULT_SKILLS = ("DSA", "ML", "DBMS", "Aptitude", "Frontend", "Backend")


def as_local_time(value: datetime) -> datetime:
    """Timestamps are compared as naive local time."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def _parse_datetime(value: Any, field_name: str) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return as_local_time(value)
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError(f"Invalid timestamp for {field_name}: {value!r}", field=field_name) from None
    return as_local_time(parsed)


def _format_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


@dataclass
class SkillState:
    """Running statistics for one skill."""

    xp: int = 0
    accuracy: float = 0.0  # running mean of per-play accuracy, 0-100
    attempts: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"xp": self.xp, "accuracy": self.accuracy, "attempts": self.attempts}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> SkillState:
        data = data or {}
        if not isinstance(data, dict):
            raise ValidationError(f"Skill state must be an object, got {data!r}", field="skills")
        return cls(
            xp=data.get("xp") or 0,
            accuracy=float(data.get("accuracy") or 0.0),
            attempts=int(data.get("attempts") or 0),
        )


@dataclass(frozen=True)
class GameHistoryEntry:
    """One completed play, appended to the learner's history."""

    game_id: str
    game_type: str
    score: int
    accuracy: int
    time_spent: float
    difficulty: str
    completed_at: datetime
    skills_tagged: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "gameId": self.game_id,
            "gameType": self.game_type,
            "score": self.score,
            "accuracy": self.accuracy,
            "timeSpent": self.time_spent,
            "difficulty": self.difficulty,
            "completedAt": _format_datetime(self.completed_at),
            "skillsTagged": list(self.skills_tagged),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameHistoryEntry:
        if not isinstance(data, dict) or not data.get("gameId"):
            raise ValidationError("History entry is missing gameId", field="gameHistory")
        return cls(
            game_id=str(data["gameId"]),
            game_type=data.get("gameType") or "",
            score=data.get("score") or 0,
            accuracy=data.get("accuracy") or 0,
            time_spent=data.get("timeSpent") or 0,
            difficulty=data.get("difficulty") or "unknown",
            completed_at=_parse_datetime(data.get("completedAt"), "completedAt") or datetime.min,
            skills_tagged=tuple(data.get("skillsTagged") or ()),
        )


@dataclass
class LearnerProgress:
    """
    A learner's progression state.

    Only the proficiency tracker mutates it. Callers must serialize
    updates per learner; nothing here locks.
    """

    xp: int = 0
    level: int = 1
    badges: set[str] = field(default_factory=set)
    streak: int = 0
    last_active_date: datetime | None = None
    skills: dict[str, SkillState] = field(default_factory=dict)
    employability_score: int = 0
    game_history: list[GameHistoryEntry] = field(default_factory=list)

    @classmethod
    def create(cls) -> LearnerProgress:
        """Fresh profile with the default skills at zero."""
        return cls(skills={skill: SkillState() for skill in DEFAULT_SKILLS})

    @property
    def played_game_ids(self) -> set[str]:
        return {entry.game_id for entry in self.game_history}

    def skill(self, name: str) -> SkillState:
        """Get a skill's state, creating it at zero on first touch."""
        if name not in self.skills:
            self.skills[name] = SkillState()
        return self.skills[name]

    def to_dict(self) -> dict[str, Any]:
        return {
            "xp": self.xp,
            "level": self.level,
            "badges": sorted(self.badges),
            "streak": self.streak,
            "lastActiveDate": _format_datetime(self.last_active_date),
            "skills": {name: state.to_dict() for name, state in self.skills.items()},
            "employabilityScore": self.employability_score,
            "gameHistory": [entry.to_dict() for entry in self.game_history],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LearnerProgress:
        """
        Build progress from a stored profile document.

        Raises:
            ValidationError: If the document or one of its records is malformed
        """
        if not isinstance(data, dict):
            raise ValidationError("Learner progress must be an object")

        # Profiles stored without skills start from the defaults, like create()
        skills = data.get("skills")
        if skills is None:
            skills = {skill: None for skill in DEFAULT_SKILLS}
        history = data.get("gameHistory") or []
        if not isinstance(skills, dict):
            raise ValidationError("skills must be an object", field="skills")
        if not isinstance(history, list):
            raise ValidationError("gameHistory must be a list", field="gameHistory")

        try:
            return cls(
                xp=data.get("xp") or 0,
                level=int(data.get("level") or 1),
                badges=set(data.get("badges") or ()),
                streak=int(data.get("streak") or 0),
                last_active_date=_parse_datetime(data.get("lastActiveDate"), "lastActiveDate"),
                skills={name: SkillState.from_dict(state) for name, state in skills.items()},
                employability_score=int(data.get("employabilityScore") or 0),
                game_history=[GameHistoryEntry.from_dict(entry) for entry in history],
            )
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Malformed learner progress: {e}") from e
