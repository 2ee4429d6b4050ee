"""
Skill Proficiency Tracker.

Folds a graded GameResult into a learner's long-lived progress:
- Per-skill XP, attempts and running-mean accuracy
- Append-only game history
- Daily streak (calendar-day comparison)
- Level from total XP
- Weighted employability score

The running mean weights the previous accuracy by the prior attempt
count, then divides by the new count:
    accuracy = (accuracy * (attempts - 1) + result.accuracy) / attempts
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from loguru import logger

from skillquest.core.scoring import level_for_xp, round_half_up
from skillquest.games.models import GameDefinition, GameResult
from skillquest.learning.models import GameHistoryEntry, LearnerProgress, SkillState, as_local_time

# Relative weight of each skill in the employability score
SKILL_WEIGHTS: dict[str, float] = {
    "DSA": 0.25,
    "ML": 0.20,
    "DBMS": 0.15,
    "Aptitude": 0.15,
    "Frontend": 0.15,
    "Backend": 0.10,
}
DEFAULT_SKILL_WEIGHT = 0.10

ATTEMPTS_CAP = 50  # attempts beyond this add no employability weight
BADGE_BONUS = 5
LEVEL_BONUS = 2

# Proficiency blend: 60% accuracy, 40% practice volume (saturates at 20 plays)
PROFICIENCY_ACCURACY_WEIGHT = 0.6
PROFICIENCY_VOLUME_WEIGHT = 0.4
PROFICIENCY_VOLUME_TARGET = 20


@dataclass
class SkillUpdate:
    """Before/after view of one skill touched by a result."""

    skill: str
    old_accuracy: float
    new_accuracy: float
    attempts: int
    xp: int


def proficiency(state: SkillState) -> int:
    """
    Display metric (0-100) blending accuracy and practice volume.

    Returns 0 for a skill that has never been attempted.
    """
    if state.attempts <= 0:
        return 0
    volume = min(state.attempts / PROFICIENCY_VOLUME_TARGET, 1.0)
    blended = (state.accuracy / 100) * PROFICIENCY_ACCURACY_WEIGHT + volume * PROFICIENCY_VOLUME_WEIGHT
    return round_half_up(blended * 100)


def employability_score(progress: LearnerProgress) -> int:
    """
    Weighted composite of skill accuracy/volume, badges and level.

    Per skill (attempted, with non-zero accuracy):
        (accuracy/100) * (min(attempts, 50)/50) * 100 * weight
    Plus 5 per badge and 2 per level, clamped to 0-100.
    """
    score = 0.0
    for skill, state in progress.skills.items():
        if state.attempts > 0 and state.accuracy:
            skill_score = (state.accuracy / 100) * (min(state.attempts, ATTEMPTS_CAP) / ATTEMPTS_CAP) * 100
            score += skill_score * SKILL_WEIGHTS.get(skill, DEFAULT_SKILL_WEIGHT)

    score += len(progress.badges) * BADGE_BONUS
    score += progress.level * LEVEL_BONUS
    return round_half_up(min(max(score, 0.0), 100.0))


def next_streak(streak: int, last_active: datetime | None, now: datetime) -> int:
    """
    Streak after activity at `now`.

    Logic:
    - Same calendar day: Keep streak
    - Previous calendar day: Increment streak
    - Anything else (or never active): Reset to 1
    """
    if last_active is None:
        return 1

    today: date = now.date()
    last_day: date = as_local_time(last_active).date()

    if last_day == today:
        return streak
    if last_day == today - timedelta(days=1):
        return streak + 1
    return 1


class SkillProficiencyTracker:
    """
    Apply graded results to learner progress.

    The clock is injectable so streak transitions can be computed for
    any "now" (defaults to the local wall clock).
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self._clock = clock or datetime.now

    def apply_result(
        self,
        progress: LearnerProgress,
        game: GameDefinition,
        result: GameResult,
        *,
        now: datetime | None = None,
        in_place: bool = False,
    ) -> LearnerProgress:
        """
        Fold one result into a learner's progress.

        Args:
            progress: Current progress (owned by the caller)
            game: The game that was played
            result: Its graded result
            now: Completion time (defaults to the tracker's clock)
            in_place: Mutate `progress` instead of returning an updated copy

        Returns:
            Updated LearnerProgress
        """
        now = as_local_time(now or self._clock())
        updated = progress if in_place else copy.deepcopy(progress)

        updates = [self._update_skill(updated, skill, result) for skill in game.skills_tagged]
        for update in updates:
            logger.debug(
                f"Skill {update.skill}: accuracy {update.old_accuracy:.1f} -> {update.new_accuracy:.1f} "
                f"({update.attempts} attempts, {update.xp} xp)"
            )

        updated.xp += result.xp_earned
        updated.game_history.append(
            GameHistoryEntry(
                game_id=game.game_id,
                game_type=game.type.value,
                score=result.score,
                accuracy=result.accuracy,
                time_spent=result.time_spent,
                difficulty=game.difficulty.value,
                completed_at=now,
                skills_tagged=game.skills_tagged,
            )
        )

        updated.streak = next_streak(updated.streak, updated.last_active_date, now)
        updated.last_active_date = now
        updated.level = level_for_xp(updated.xp)
        updated.employability_score = employability_score(updated)

        logger.info(
            f"Applied {game.game_id}: +{result.xp_earned} xp (total {updated.xp}), "
            f"level {updated.level}, streak {updated.streak}, "
            f"employability {updated.employability_score}"
        )
        return updated

    def _update_skill(self, progress: LearnerProgress, skill: str, result: GameResult) -> SkillUpdate:
        state = progress.skill(skill)
        old_accuracy = state.accuracy

        state.attempts += 1
        state.xp += result.xp_earned
        state.accuracy = (state.accuracy * (state.attempts - 1) + result.accuracy) / state.attempts

        return SkillUpdate(
            skill=skill,
            old_accuracy=old_accuracy,
            new_accuracy=state.accuracy,
            attempts=state.attempts,
            xp=state.xp,
        )


_tracker = SkillProficiencyTracker()


def apply_result(
    progress: LearnerProgress,
    game: GameDefinition,
    result: GameResult,
    *,
    now: datetime | None = None,
    in_place: bool = False,
) -> LearnerProgress:
    """Fold one result into a learner's progress (copy by default)."""
    return _tracker.apply_result(progress, game, result, now=now, in_place=in_place)
