"""
Spaced-repetition notation scanners.

Inline, one card per line:

    **Flashcard:** Front :: Back <!--Hint: hint--><!--fc-id:id--><!--fc-flagged:true-->

Multiline, front and back split by a separator line:

    **Flashcard:** Front
    ??
    Back content
    <!--Hint: hint-->
    <!--fc-id:id-->

Both separators come from ParserConfig and are matched literally. Every line is
scanned in linear time.
"""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import List, Optional, Pattern, Tuple

from .callout import is_callout_start
from .markers import is_comment_line, is_metadata_line, parse_hint_line, parse_markers
from .models import Flashcard
from .state import ScanResult, ScanState, build_flashcard, join_section
from ..config_models import ParserConfig

logger = logging.getLogger(__name__)

CARD_MARKER = re.compile(r"^\*{2}Flashcard:\*{2}\s*", re.IGNORECASE)
_INLINE_MARKER = re.compile(r"\*{2}Flashcard:\*{2}", re.IGNORECASE)

_FLAGGED_SUFFIX = "<!--fc-flagged:true-->"
_ID_OPEN = "<!--fc-id:"
_HINT_OPEN = "<!--Hint:"
_COMMENT_CLOSE = "-->"


@lru_cache(maxsize=32)
def _block_separator_pattern(separator: str) -> Pattern[str]:
    return re.compile(r"^" + re.escape(separator) + r"\s*$")


def is_card_start(line: str) -> bool:
    """True when ``line`` opens a card in any notation."""
    return is_callout_start(line) or CARD_MARKER.match(line) is not None


def _pop_comment(text: str, opener: str) -> Tuple[str, Optional[str]]:
    """Split a trailing ``opener...-->`` comment off ``text``."""
    if not text.endswith(_COMMENT_CLOSE):
        return text, None
    start = text.rfind(opener)
    if start == -1:
        return text, None
    return text[:start], text[start + len(opener):-len(_COMMENT_CLOSE)]


def split_inline(line: str, separator: str = "::") -> Optional[Tuple[str, str, Optional[str], Optional[str], bool]]:
    """Split one inline card line into (front, back, hint, card_id, flagged).

    The first marker on the line opens the card and the first separator after
    it ends the front. Hint, id and flag comments are read off the end of the
    line in that order. Returns None when the line holds no inline card.
    """
    marker = _INLINE_MARKER.search(line)
    if marker is None:
        return None
    rest = line[marker.end():]
    cut = rest.find(separator)
    if cut == -1:
        return None
    front = rest[:cut]
    tail = rest[cut + len(separator):].rstrip()

    flagged = tail.endswith(_FLAGGED_SUFFIX)
    if flagged:
        tail = tail[:-len(_FLAGGED_SUFFIX)]
    tail, card_id = _pop_comment(tail, _ID_OPEN)
    tail, hint = _pop_comment(tail.rstrip(), _HINT_OPEN)
    return front.strip(), tail.strip(), hint, card_id, flagged


def parse_inline(text: str, separator: str = "::") -> List[Flashcard]:
    """Every inline flashcard in ``text``, at most one per line."""
    cards: List[Flashcard] = []
    for number, line in enumerate(text.split("\n"), start=1):
        try:
            parts = split_inline(line, separator)
            if parts is None:
                continue
            front, back, hint, card_id, flagged = parts
            card = build_flashcard(front, back, hint, card_id, flagged)
        except Exception as e:
            logger.warning("Skipping malformed inline flashcard", extra={"line": number, "error": str(e)})
            continue
        if card is not None:
            cards.append(card)
    return cards


def scan_multiline(lines: List[str], start: int, config: ParserConfig) -> ScanResult:
    """Parse the multiline card whose marker line is ``lines[start]``."""
    first = CARD_MARKER.sub("", lines[start], count=1).strip()
    if config.inline_separator in first:
        # inline card, handled by parse_inline
        return ScanResult(None, start + 1)

    separator = _block_separator_pattern(config.block_separator)
    front: List[str] = [first] if first else []
    back: List[str] = []
    hint = None
    card_id = None
    flagged = False

    i = start + 1
    state = ScanState.FRONT
    while state is not ScanState.SCAN:
        line = lines[i] if i < len(lines) else None

        if state is ScanState.FRONT:
            if line is None or CARD_MARKER.match(line):
                # no separator before the next card or end of input
                return ScanResult(None, start + 1)
            if separator.match(line):
                state = ScanState.BACK
            else:
                front.append(line)
            i += 1

        elif state is ScanState.BACK:
            if line is None or is_comment_line(line) or CARD_MARKER.match(line):
                state = ScanState.HINT
            elif line.strip() == "":
                # keep blank lines inside the body unless a card or the end follows
                if i + 1 < len(lines) and not is_card_start(lines[i + 1]):
                    back.append(line)
                    i += 1
                else:
                    state = ScanState.HINT
            else:
                back.append(line)
                i += 1

        elif state is ScanState.HINT:
            if line is not None:
                hint = parse_hint_line(line)
                if hint is not None:
                    if is_metadata_line(line):
                        card_id, flagged = parse_markers(line)
                    i += 1
            state = ScanState.METADATA

        elif state is ScanState.METADATA:
            if i < len(lines) and is_metadata_line(lines[i]):
                markers = parse_markers(lines[i])
                card_id = markers.card_id or card_id
                flagged = flagged or markers.flagged
                i += 1
            if i < len(lines) and lines[i].strip() == "":
                i += 1
            state = ScanState.SCAN

    card = build_flashcard(join_section(front), join_section(back), hint, card_id, flagged)
    return ScanResult(card, i)


def parse_multiline(lines: List[str], config: ParserConfig) -> List[Flashcard]:
    """Every multiline flashcard in ``lines``, in document order."""
    cards: List[Flashcard] = []
    i = 0
    while i < len(lines):
        if not CARD_MARKER.match(lines[i]):
            i += 1
            continue
        try:
            card, next_index = scan_multiline(lines, i, config)
        except Exception as e:
            logger.warning("Skipping malformed multiline flashcard", extra={"line": i + 1, "error": str(e)})
            i += 1
            continue
        if card is not None:
            cards.append(card)
        i = max(next_index, i + 1)
    return cards
