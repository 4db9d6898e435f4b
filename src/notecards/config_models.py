from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator


class ParserConfig(BaseModel):
    """Notation settings for the flashcard text parser."""

    inline_separator: str = Field(default="::", min_length=1, description="Separator between front and back in inline cards")
    block_separator: str = Field(default="??", min_length=1, description="Line separating front and back in multiline cards")


class SchedulerConfig(BaseModel):
    """Bounds and multipliers for the SM-2 review scheduler.

    - ease bounds clamp the ease factor after every review
    - interval bounds (days) clamp every computed interval
    - good_interval_multiplier is the reference for the EASY bonus (easy / good);
      GOOD itself scales by the card's ease factor
    - mastery_* fields gate the LEARNING -> MASTERED transition
    """

    min_ease_factor: float = Field(default=1.3, gt=0, description="Lowest allowed ease factor")
    max_ease_factor: float = Field(default=3.0, gt=0, description="Highest allowed ease factor")
    default_ease_factor: float = Field(default=2.5, gt=0, description="Ease factor for newly seen cards")

    again_interval: float = Field(default=1.0, gt=0, description="Interval in days after an AGAIN rating")
    hard_interval_multiplier: float = Field(default=1.2, gt=0, description="Interval multiplier for HARD")
    good_interval_multiplier: float = Field(default=2.5, gt=0, description="Nominal GOOD multiplier; EASY bonus reference")
    easy_interval_multiplier: float = Field(default=3.0, gt=0, description="Interval multiplier for EASY")

    min_interval: float = Field(default=1.0, gt=0, description="Shortest interval in days")
    max_interval: float = Field(default=365.0, gt=0, description="Longest interval in days")

    max_review_history_length: int = Field(default=50, ge=1, description="Review records kept per card")

    mastery_consecutive_success_threshold: int = Field(default=3, ge=1, description="Consecutive successes needed for mastery")
    mastery_min_interval: float = Field(default=21.0, ge=0, description="Minimum interval in days for mastery")
    mastery_min_ease: float = Field(default=2.0, gt=0, description="Minimum ease factor for mastery")

    @model_validator(mode="after")
    def _check_bounds(self) -> "SchedulerConfig":
        from .scheduling.validators import validate_scheduler_config

        validate_scheduler_config(self)
        return self


class RunConfig(BaseModel):
    """Top-level configuration loaded from YAML."""

    log_level: str = Field(default="INFO", description="Logging level for the notecards namespace")
    parser: ParserConfig = Field(default_factory=ParserConfig)
    scheduler: SchedulerConfig = Field(default_factory=SchedulerConfig)


def load_run_config(path: Path | None) -> RunConfig:
    """Load and validate a YAML run configuration.

    A missing ``path`` (None) yields the built-in defaults.
    """
    if path is None:
        return RunConfig()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}

    try:
        return RunConfig.model_validate(raw)
    except ValidationError as ve:
        raise SystemExit(f"Invalid configuration in {path}:\n{ve}")
