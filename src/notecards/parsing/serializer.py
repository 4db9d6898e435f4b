"""
Writers for the two supported notations.

Whatever these produce, ``parse_flashcards`` reads back with the same id,
front, back, hint and flagged state.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Optional

from .markers import format_hint, format_markers
from .models import Flashcard
from ..config_models import ParserConfig

_TABLE_ROW = re.compile(r"^\s*\|.*\|\s*$", re.MULTILINE)


class SaveFormat(str, Enum):
    CALLOUT = "Callout"
    SPACED_REPETITION = "Spaced Repetition"


def contains_table(content: str) -> bool:
    return _TABLE_ROW.search(content) is not None


def format_as_callout(card: Flashcard) -> str:
    front_lines = card.front.strip().split("\n")
    out = [f"> [!flashcard] {front_lines[0]}"]
    out.extend(f"> {line}" for line in front_lines[1:])

    out.append(">> [!answer]-")
    out.extend(f">> {line}" for line in card.back.strip().split("\n"))

    if card.hint and card.hint.strip():
        out.append(">>")
        out.append(">> [!hint]-")
        out.extend(f">> {line}" for line in card.hint.strip().split("\n"))

    out.append(format_markers(card.id, card.flagged))
    return "\n".join(out) + "\n"


def _fits_spaced_notation(front: str, config: ParserConfig) -> bool:
    """The front's first line cannot hold the inline separator and no front line may be the block separator."""
    lines = front.split("\n")
    if config.inline_separator in lines[0]:
        return False
    return all(line.strip() != config.block_separator for line in lines)


def format_as_spaced_repetition(card: Flashcard, config: Optional[ParserConfig] = None) -> str:
    """Inline form for single-line cards, multiline form for anything with newlines or tables.

    Cards whose front collides with a separator are written as callouts,
    which ``parse_flashcards`` reads from the same document.
    """
    config = config or ParserConfig()
    front = card.front.strip()
    back = card.back.strip()
    markers = format_markers(card.id, card.flagged)
    has_hint = bool(card.hint and card.hint.strip())

    if not _fits_spaced_notation(front, config):
        return format_as_callout(card) + "\n"

    multiline = (
        "\n" in front
        or "\n" in back
        or contains_table(front)
        or contains_table(back)
        # a trailing comment in the back would be read as card metadata
        or "<!--" in back
    )
    if multiline:
        out = f"**Flashcard:** {front}\n{config.block_separator}\n{back}\n"
        if has_hint:
            out += format_hint(card.hint) + "\n"
        return out + markers + "\n\n"

    out = f"**Flashcard:** {front} {config.inline_separator} {back}"
    if has_hint:
        out += " " + format_hint(card.hint)
    return out + markers + "\n\n"


def format_flashcards(
        cards: Iterable[Flashcard],
        save_format: SaveFormat = SaveFormat.CALLOUT,
        config: Optional[ParserConfig] = None,
) -> str:
    """Render many cards as one markdown block."""
    if save_format is SaveFormat.SPACED_REPETITION:
        return "".join(format_as_spaced_repetition(card, config) for card in cards)
    return "\n".join(format_as_callout(card) for card in cards)
