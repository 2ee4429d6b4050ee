"""
Exceptions raised by the SkillQuest engine.

Philosophy:
- Malformed definitions fail fast with an explicit error
- Bad individual answers are never errors (they are scored incorrect)
"""

from __future__ import annotations


class SkillQuestError(Exception):
    """Base class for all engine errors."""
    pass


class ValidationError(SkillQuestError):
    """Raised when a game definition or submission is malformed."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
