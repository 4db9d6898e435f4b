from .mastery import classify_mastery, meets_mastery_gates, next_mastery_level
from .models import (
    ConfidenceRating,
    FlashcardMetadata,
    MasteryLevel,
    PracticeMode,
    ReviewRecord,
)
from .scheduler import (
    calculate_next_review,
    filter_by_mastery_level,
    get_due_cards,
    get_due_cards_by_mastery_level,
    initialize_metadata,
)
from .validators import ContractViolation, validate_rating

__all__ = [
    # models
    "ConfidenceRating",
    "FlashcardMetadata",
    "MasteryLevel",
    "PracticeMode",
    "ReviewRecord",
    # scheduler
    "calculate_next_review",
    "filter_by_mastery_level",
    "get_due_cards",
    "get_due_cards_by_mastery_level",
    "initialize_metadata",
    # mastery
    "classify_mastery",
    "meets_mastery_gates",
    "next_mastery_level",
    # validators
    "ContractViolation",
    "validate_rating",
]
