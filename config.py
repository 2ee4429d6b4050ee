"""
Configuration settings for the SkillQuest engine.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    # ========================================
    # Storage (CLI only)
    # ========================================
    games_dir: str = Field(
        default="data/games",
        description="Directory of game template JSON files",
    )
    progress_file: str = Field(
        default="data/progress.json",
        description="Learner progress JSON document",
    )

    # ========================================
    # Skill Gap Analysis
    # ========================================
    gap_min_accuracy: float = Field(
        default=70.0,
        description="Accuracy (0-100) a skill needs to stop being a gap",
    )
    gap_min_attempts: int = Field(
        default=10,
        description="Attempts a skill needs to stop being a gap",
    )
    gap_accuracy_weight: float = Field(
        default=0.6,
        description="Priority weight per missing accuracy point",
    )
    gap_attempt_weight: float = Field(
        default=4.0,
        description="Priority weight per missing attempt",
    )

    # ========================================
    # Recommendations
    # ========================================
    recommend_per_gap: int = Field(
        default=3,
        description="Games recommended per skill gap",
    )
    recommend_per_strong_skill: int = Field(
        default=2,
        description="Advanced games suggested per strong skill",
    )
    recommend_max_results: int = Field(
        default=10,
        description="Maximum recommendations returned",
    )

    # ========================================
    # Learning Path
    # ========================================
    path_games_per_week: int = Field(
        default=5,
        description="Games scheduled per plan week",
    )
    path_target_level_offset: int = Field(
        default=2,
        description="Levels above the current one used as the plan target",
    )

    def get_gap_thresholds(self) -> dict[str, Any]:
        """Get skill gap thresholds and priority weights."""
        return {
            "min_accuracy": self.gap_min_accuracy,
            "min_attempts": self.gap_min_attempts,
            "accuracy_weight": self.gap_accuracy_weight,
            "attempt_weight": self.gap_attempt_weight,
        }

    def get_recommendation_config(self) -> dict[str, int]:
        """Get recommendation sizes."""
        return {
            "per_gap": self.recommend_per_gap,
            "per_strong_skill": self.recommend_per_strong_skill,
            "max_results": self.recommend_max_results,
        }

    def get_path_config(self) -> dict[str, int]:
        """Get learning path sizes."""
        return {
            "games_per_week": self.path_games_per_week,
            "target_level_offset": self.path_target_level_offset,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
