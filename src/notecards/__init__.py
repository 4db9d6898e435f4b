"""notecards package.

Spaced-repetition core for flashcards written inside markdown notes:
- parse_flashcards: From note text to structured flashcards (callout, inline and multiline notations)
- calculate_next_review: From a card's schedule state and a rating to its next schedule state

All modules are fully typed.
"""
from .config_models import ParserConfig, RunConfig, SchedulerConfig, load_run_config
from .parsing import Flashcard, SaveFormat, format_flashcards, parse_flashcards
from .review import InMemoryMetadataStore, NoActiveSessionError, ReviewSessionManager, StudySession
from .scheduling import (
    ConfidenceRating,
    ContractViolation,
    FlashcardMetadata,
    MasteryLevel,
    PracticeMode,
    ReviewRecord,
    calculate_next_review,
    get_due_cards,
    initialize_metadata,
)

__all__ = [
    "ParserConfig",
    "RunConfig",
    "SchedulerConfig",
    "load_run_config",
    "Flashcard",
    "SaveFormat",
    "format_flashcards",
    "parse_flashcards",
    "InMemoryMetadataStore",
    "NoActiveSessionError",
    "ReviewSessionManager",
    "StudySession",
    "ConfidenceRating",
    "ContractViolation",
    "FlashcardMetadata",
    "MasteryLevel",
    "PracticeMode",
    "ReviewRecord",
    "calculate_next_review",
    "get_due_cards",
    "initialize_metadata",
]
