"""
SM-2 review scheduler.

Each rating turns the current schedule state into a new one:

- AGAIN: interval resets to ``again_interval``, ease drops by 0.20, streak resets
- HARD:  interval x ``hard_interval_multiplier``, ease drops by 0.15
- GOOD:  interval x ease factor, ease unchanged
- EASY:  interval x ease factor x (``easy_interval_multiplier`` / ``good_interval_multiplier``), ease rises by 0.15

Ease is clamped to the configured ease bounds and intervals to the configured
interval bounds, so a brand-new card (interval 0) lands on ``min_interval``
after its first successful review.

Everything here is a pure function of its arguments; ``now`` can be injected.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .mastery import next_mastery_level
from .models import (
    DEFAULT_EASE_FACTOR,
    ConfidenceRating,
    FlashcardMetadata,
    MasteryLevel,
    PracticeMode,
    ReviewRecord,
)
from .validators import validate_elapsed, validate_rating, validate_scheduler_config
from ..common.ids import days_to_ms, now_ms
from ..config_models import SchedulerConfig

logger = logging.getLogger(__name__)

AGAIN_EASE_PENALTY = 0.20
HARD_EASE_PENALTY = 0.15
EASY_EASE_BONUS = 0.15


def initialize_metadata(
        card_id: str,
        *,
        ease_factor: float = DEFAULT_EASE_FACTOR,
        now: Optional[int] = None,
) -> FlashcardMetadata:
    """Schedule state for a card that has never been reviewed. It is due immediately."""
    return FlashcardMetadata(
        id=card_id,
        ease_factor=ease_factor,
        interval=0.0,
        due_date=now_ms() if now is None else now,
        mastery_level=MasteryLevel.NEW,
        consecutive_successes=0,
        repetitions=0,
        last_reviewed=0,
        review_history=[],
        practice_mode=None,
    )


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _next_ease(ease: float, rating: ConfidenceRating, config: SchedulerConfig) -> float:
    if rating is ConfidenceRating.AGAIN:
        ease -= AGAIN_EASE_PENALTY
    elif rating is ConfidenceRating.HARD:
        ease -= HARD_EASE_PENALTY
    elif rating is ConfidenceRating.EASY:
        ease += EASY_EASE_BONUS
    return _clamp(ease, config.min_ease_factor, config.max_ease_factor)


def _next_interval(
        interval: float,
        ease: float,
        rating: ConfidenceRating,
        config: SchedulerConfig,
) -> float:
    """Unclamped interval for ``rating``; ``ease`` is the ease before this review."""
    if rating is ConfidenceRating.AGAIN:
        return config.again_interval
    if rating is ConfidenceRating.HARD:
        # a new card has no interval to scale yet
        return max(interval, config.min_interval) * config.hard_interval_multiplier
    if rating is ConfidenceRating.GOOD:
        return interval * ease
    easy_bonus = config.easy_interval_multiplier / config.good_interval_multiplier
    return interval * ease * easy_bonus


def _trim_history(history: List[ReviewRecord], cap: int) -> List[ReviewRecord]:
    if len(history) > cap:
        return history[-cap:]
    return history


def calculate_next_review(
        metadata: FlashcardMetadata,
        rating: ConfidenceRating,
        elapsed_ms: int,
        config: SchedulerConfig,
        mode: PracticeMode = PracticeMode.STANDARD,
        now: Optional[int] = None,
) -> FlashcardMetadata:
    """Apply one review to ``metadata`` and return the new schedule state.

    Args:
        metadata: Current state, from ``initialize_metadata`` for unseen cards.
            It is not modified.
        rating: The user's confidence rating.
        elapsed_ms: Time spent on the card. Stored in history only.
        config: Scheduler bounds and multipliers.
        mode: Practice mode. Stored in history only.
        now: Review time in epoch milliseconds, defaults to the wall clock.

    Raises:
        ContractViolation: for an unknown rating, a negative elapsed time,
            or an inconsistent config.
    """
    rating = validate_rating(rating)
    elapsed_ms = validate_elapsed(elapsed_ms)
    validate_scheduler_config(config)
    mode = PracticeMode(mode)
    now = now_ms() if now is None else now

    interval = _clamp(
        _next_interval(metadata.interval, metadata.ease_factor, rating, config),
        config.min_interval,
        config.max_interval,
    )
    ease = _next_ease(metadata.ease_factor, rating, config)

    if rating is ConfidenceRating.AGAIN:
        consecutive = 0
        repetitions = metadata.repetitions
    else:
        consecutive = metadata.consecutive_successes + 1
        repetitions = metadata.repetitions + 1

    history = list(metadata.review_history)
    history.append(ReviewRecord(timestamp=now, rating=rating, mode=mode, time_spent=elapsed_ms))

    updated = metadata.model_copy(
        update={
            "ease_factor": ease,
            "interval": interval,
            "due_date": now + days_to_ms(interval),
            "consecutive_successes": consecutive,
            "repetitions": repetitions,
            "last_reviewed": now,
            "review_history": _trim_history(history, config.max_review_history_length),
            "practice_mode": mode,
        }
    )
    updated.mastery_level = next_mastery_level(metadata.mastery_level, rating, updated, config)

    logger.debug(
        "Scheduled review",
        extra={
            "card_id": metadata.id,
            "rating": rating.name,
            "interval": round(interval, 2),
            "ease": round(ease, 2),
            "mastery": updated.mastery_level.value,
        },
    )
    return updated


def get_due_cards(all_metadata: Iterable[FlashcardMetadata], now: Optional[int] = None) -> List[FlashcardMetadata]:
    """Cards due at ``now``: most overdue first, then shortest interval first."""
    now = now_ms() if now is None else now
    due = [m for m in all_metadata if m.due_date <= now]
    return sorted(due, key=lambda m: (m.due_date, m.interval))


def filter_by_mastery_level(all_metadata: Iterable[FlashcardMetadata], level: MasteryLevel) -> List[FlashcardMetadata]:
    return [m for m in all_metadata if m.mastery_level is level]


def get_due_cards_by_mastery_level(
        all_metadata: Iterable[FlashcardMetadata],
        level: MasteryLevel,
        now: Optional[int] = None,
) -> List[FlashcardMetadata]:
    return filter_by_mastery_level(get_due_cards(all_metadata, now), level)
