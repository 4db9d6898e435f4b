"""
Mastery state machine.

    NEW      --first non-AGAIN review-->                 LEARNING
    LEARNING --GOOD/EASY with all mastery gates met-->   MASTERED
    MASTERED --AGAIN-->                                  LEARNING

AGAIN keeps NEW and LEARNING cards where they are. HARD moves a NEW card to
LEARNING but never promotes to MASTERED. No transition leads back to NEW.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from .models import ConfidenceRating, FlashcardMetadata, MasteryLevel, ReviewRecord

if TYPE_CHECKING:
    from ..config_models import SchedulerConfig

_PROMOTING_RATINGS = frozenset({ConfidenceRating.GOOD, ConfidenceRating.EASY})


def meets_mastery_gates(
        consecutive_successes: int,
        interval: float,
        ease_factor: float,
        config: "SchedulerConfig",
) -> bool:
    """All three mastery thresholds must hold at once."""
    return (
        consecutive_successes >= config.mastery_consecutive_success_threshold
        and interval >= config.mastery_min_interval
        and ease_factor >= config.mastery_min_ease
    )


def next_mastery_level(
        current: MasteryLevel,
        rating: ConfidenceRating,
        updated: FlashcardMetadata,
        config: "SchedulerConfig",
) -> MasteryLevel:
    """Mastery level after ``rating``, given the already-updated schedule state."""
    if rating is ConfidenceRating.AGAIN:
        if current is MasteryLevel.MASTERED:
            return MasteryLevel.LEARNING
        return current

    if current is MasteryLevel.NEW:
        return MasteryLevel.LEARNING

    if current is MasteryLevel.LEARNING and rating in _PROMOTING_RATINGS:
        if meets_mastery_gates(updated.consecutive_successes, updated.interval, updated.ease_factor, config):
            return MasteryLevel.MASTERED

    return current


def count_consecutive_successes(history: List[ReviewRecord]) -> int:
    """Non-AGAIN reviews at the tail of ``history``."""
    count = 0
    for record in reversed(history):
        if record.rating is ConfidenceRating.AGAIN:
            break
        count += 1
    return count


def classify_mastery(metadata: FlashcardMetadata, config: "SchedulerConfig") -> MasteryLevel:
    """Derive a mastery level from stored state alone.

    Useful for metadata written before mastery was tracked. The history may be
    truncated, so the stored counter wins when it is larger.
    """
    if not metadata.review_history and metadata.repetitions == 0:
        return MasteryLevel.NEW
    streak = max(metadata.consecutive_successes, count_consecutive_successes(metadata.review_history))
    if meets_mastery_gates(streak, metadata.interval, metadata.ease_factor, config):
        return MasteryLevel.MASTERED
    if metadata.repetitions == 0 and streak == 0:
        return MasteryLevel.NEW
    return MasteryLevel.LEARNING
