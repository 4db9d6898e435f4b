from .callout import parse_callouts, scan_callout
from .markers import CardMarkers, format_markers, parse_markers
from .models import Flashcard
from .parser import parse_flashcards
from .serializer import (
    SaveFormat,
    format_as_callout,
    format_as_spaced_repetition,
    format_flashcards,
)
from .spaced import is_card_start, parse_inline, parse_multiline, scan_multiline

__all__ = [
    # models
    "Flashcard",
    "CardMarkers",
    # parsing
    "parse_flashcards",
    "parse_callouts",
    "parse_inline",
    "parse_multiline",
    "scan_callout",
    "scan_multiline",
    "is_card_start",
    "parse_markers",
    # writing
    "SaveFormat",
    "format_as_callout",
    "format_as_spaced_repetition",
    "format_flashcards",
    "format_markers",
]
