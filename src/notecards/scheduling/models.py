"""
Data models for review scheduling state.
"""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import List, Optional

from pydantic import BaseModel, Field

DEFAULT_EASE_FACTOR = 2.5


class ConfidenceRating(IntEnum):
    """How well a card was recalled."""
    AGAIN = 0  # forgot
    HARD = 1   # recalled with difficulty
    GOOD = 2   # recalled with some thought
    EASY = 3   # instant recall


class MasteryLevel(str, Enum):
    """Coarse learning progress of a card."""
    NEW = "new"
    LEARNING = "learning"
    MASTERED = "mastered"


class PracticeMode(str, Enum):
    """How the card was practiced. Stored for history only."""
    STANDARD = "standard"
    TYPE_ANSWER = "type-answer"
    MULTIPLE_CHOICE = "multiple-choice"
    CLOZE = "cloze-deletion"


class ReviewRecord(BaseModel):
    """A single entry of a card's review history."""

    timestamp: int = Field(..., description="Epoch milliseconds of the review")
    rating: ConfidenceRating = Field(..., description="Rating given")
    mode: PracticeMode = Field(default=PracticeMode.STANDARD, description="Practice mode used")
    time_spent: int = Field(default=0, ge=0, description="Time spent on the card in milliseconds")


class FlashcardMetadata(BaseModel):
    """Scheduling state for one card, keyed by the card id."""

    id: str = Field(..., description="Id of the flashcard this state belongs to")
    ease_factor: float = Field(default=DEFAULT_EASE_FACTOR, description="SM-2 ease factor")
    interval: float = Field(default=0.0, ge=0, description="Days until the next review")
    due_date: int = Field(default=0, description="Epoch milliseconds when the card is due")
    mastery_level: MasteryLevel = Field(default=MasteryLevel.NEW)
    consecutive_successes: int = Field(default=0, ge=0, description="Non-AGAIN reviews since the last AGAIN")
    repetitions: int = Field(default=0, ge=0, description="Total non-AGAIN reviews")
    last_reviewed: int = Field(default=0, description="Epoch milliseconds of the last review, 0 if never")
    review_history: List[ReviewRecord] = Field(default_factory=list, description="Most recent reviews, oldest first")
    practice_mode: Optional[PracticeMode] = Field(default=None, description="Practice mode of the last review")
