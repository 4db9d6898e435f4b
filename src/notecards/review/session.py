from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from .store import MetadataStore
from ..common.ids import now_ms
from ..config_models import SchedulerConfig
from ..scheduling.models import ConfidenceRating, FlashcardMetadata, PracticeMode
from ..scheduling.scheduler import calculate_next_review, initialize_metadata
from ..scheduling.validators import validate_rating

logger = logging.getLogger(__name__)


class NoActiveSessionError(RuntimeError):
    pass


class StudySession(BaseModel):
    """Counters for one sitting over a deck."""

    deck_id: str
    start_time: int = Field(..., description="Epoch milliseconds when the session started")
    end_time: Optional[int] = Field(default=None, description="Epoch milliseconds when it ended, None while active")
    cards_reviewed: int = 0
    new_cards: int = 0
    correct_count: int = 0
    again_count: int = 0
    again_card_ids: List[str] = Field(default_factory=list)
    practice_mode: PracticeMode = PracticeMode.STANDARD

    @property
    def duration_ms(self) -> Optional[int]:
        if self.end_time is None:
            return None
        return self.end_time - self.start_time


class ReviewSessionManager:
    """Runs review sessions against a metadata store, one active session at a time.

    Each instance owns its session. Starting a new session ends the active one.
    """

    def __init__(self, store: MetadataStore, config: Optional[SchedulerConfig] = None) -> None:
        self.store = store
        self.config = config or SchedulerConfig()
        self._session: Optional[StudySession] = None

    @property
    def current_session(self) -> Optional[StudySession]:
        return self._session.model_copy(deep=True) if self._session else None

    def start_session(
            self,
            deck_id: str,
            practice_mode: PracticeMode = PracticeMode.STANDARD,
            now: Optional[int] = None,
    ) -> StudySession:
        practice_mode = PracticeMode(practice_mode)
        if self._session is not None:
            self.end_session(now=now)

        self._session = StudySession(
            deck_id=deck_id,
            start_time=now_ms() if now is None else now,
            practice_mode=practice_mode,
        )
        logger.info("Started review session", extra={"deck_id": deck_id, "mode": practice_mode.value})
        return self._session.model_copy()

    def record_review(
            self,
            card_id: str,
            rating: ConfidenceRating,
            time_spent_ms: int = 0,
            now: Optional[int] = None,
    ) -> FlashcardMetadata:
        """Schedule ``card_id`` after ``rating`` and persist the result."""
        if self._session is None:
            raise NoActiveSessionError("No active review session")
        rating = validate_rating(rating)

        metadata = self.store.get(card_id)
        is_new = metadata is None
        if metadata is None:
            metadata = initialize_metadata(card_id, ease_factor=self.config.default_ease_factor, now=now)

        updated = calculate_next_review(
            metadata,
            rating,
            time_spent_ms,
            self.config,
            mode=self._session.practice_mode,
            now=now,
        )
        self.store.set(updated)

        session = self._session
        if is_new:
            session.new_cards += 1
        session.cards_reviewed += 1
        if rating is ConfidenceRating.AGAIN:
            session.again_count += 1
            if card_id not in session.again_card_ids:
                session.again_card_ids.append(card_id)
        else:
            session.correct_count += 1

        logger.debug(
            "Recorded review",
            extra={"card_id": card_id, "rating": rating.name, "next_interval": round(updated.interval, 2)},
        )
        return updated

    def end_session(self, now: Optional[int] = None) -> StudySession:
        if self._session is None:
            raise NoActiveSessionError("No active review session")

        session = self._session
        session.end_time = now_ms() if now is None else now
        self._session = None

        logger.info(
            "Ended review session",
            extra={
                "deck_id": session.deck_id,
                "reviewed": session.cards_reviewed,
                "correct": session.correct_count,
                "again": session.again_count,
                "new": session.new_cards,
                "minutes": round(session.duration_ms / 60000),
            },
        )
        return session

    def cancel_session(self) -> None:
        """Drop the active session without finalizing it."""
        self._session = None
