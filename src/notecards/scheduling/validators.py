from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .models import ConfidenceRating

if TYPE_CHECKING:
    from ..config_models import SchedulerConfig


class ContractViolation(ValueError):
    """Raised when the scheduler is called with arguments no caller should pass."""


def validate_rating(rating: Any) -> ConfidenceRating:
    """Return ``rating`` as a ConfidenceRating or fail fast.

    Plain ints 0-3 are accepted; bools and anything out of range are not.
    """
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ContractViolation(f"Rating must be a ConfidenceRating, got {rating!r}")
    try:
        return ConfidenceRating(rating)
    except ValueError:
        raise ContractViolation(f"Rating out of range: {rating!r}") from None


def validate_elapsed(elapsed_ms: Any) -> int:
    if isinstance(elapsed_ms, bool) or not isinstance(elapsed_ms, (int, float)):
        raise ContractViolation(f"Elapsed time must be a number of milliseconds, got {elapsed_ms!r}")
    if elapsed_ms < 0:
        raise ContractViolation(f"Elapsed time cannot be negative: {elapsed_ms!r}")
    return int(elapsed_ms)


def validate_scheduler_config(config: "SchedulerConfig") -> None:
    """Cross-field checks that single-field constraints cannot express."""
    problems = []
    if config.min_ease_factor > config.max_ease_factor:
        problems.append(
            f"min_ease_factor ({config.min_ease_factor}) > max_ease_factor ({config.max_ease_factor})"
        )
    elif not config.min_ease_factor <= config.default_ease_factor <= config.max_ease_factor:
        problems.append(
            f"default_ease_factor ({config.default_ease_factor}) outside "
            f"[{config.min_ease_factor}, {config.max_ease_factor}]"
        )
    if config.min_interval > config.max_interval:
        problems.append(f"min_interval ({config.min_interval}) > max_interval ({config.max_interval})")
    elif not config.min_interval <= config.again_interval <= config.max_interval:
        problems.append(
            f"again_interval ({config.again_interval}) outside "
            f"[{config.min_interval}, {config.max_interval}]"
        )
    if config.easy_interval_multiplier < config.good_interval_multiplier:
        problems.append(
            f"easy_interval_multiplier ({config.easy_interval_multiplier}) < "
            f"good_interval_multiplier ({config.good_interval_multiplier})"
        )
    for name in (
        "min_ease_factor",
        "again_interval",
        "hard_interval_multiplier",
        "good_interval_multiplier",
        "easy_interval_multiplier",
        "min_interval",
    ):
        if getattr(config, name) <= 0:
            problems.append(f"{name} must be positive")
    if config.max_review_history_length < 1:
        problems.append("max_review_history_length must be at least 1")
    if config.mastery_consecutive_success_threshold < 1:
        problems.append("mastery_consecutive_success_threshold must be at least 1")

    if problems:
        raise ContractViolation("Invalid scheduler config: " + "; ".join(problems))
