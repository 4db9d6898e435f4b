"""
Callout notation scanner.

    > [!flashcard] Front content
    > more front
    >> [!answer]-
    >> Back content
    >>
    >> [!hint]-
    >> Hint content
    <!--fc-id:abc123--><!--fc-flagged:true-->

Each candidate is walked line by line through FRONT -> BACK -> HINT -> METADATA.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from .markers import is_metadata_line, parse_markers
from .models import Flashcard
from .state import ScanResult, ScanState, build_flashcard, join_section

logger = logging.getLogger(__name__)

CALLOUT_START = re.compile(r"^>[ \t]*\[!flashcard\][+-]?[ \t]*", re.IGNORECASE)
_ANSWER_HEADER = re.compile(r"^>[ \t]*>[ \t]*\[!answer\]", re.IGNORECASE)
_HINT_HEADER = re.compile(r"^>[ \t]*>[ \t]*\[!hint\]", re.IGNORECASE)

_DEPTH1_BLANK = re.compile(r"^>[ \t]*$")
_DEPTH1_PREFIX = re.compile(r"^>[ ]?")
_DEPTH2_BLANK = re.compile(r"^>[ \t]*>[ \t]*$")
# content keeps any indentation past the single space after the markers
_DEPTH2_PREFIX = re.compile(r"^>[ \t]*>[ ]?")
_DEPTH2_CONTENT = re.compile(r"^>[ \t]*>[ \t]*[^>]")


def is_callout_start(line: str) -> bool:
    return CALLOUT_START.match(line) is not None


def _section_line(line: str) -> Tuple[bool, Optional[str]]:
    """Classify a line inside an answer or hint section.

    Returns (continues, content): content is None for depth-1 spacer lines,
    and continues is False for the line that closes the section.
    """
    if _DEPTH2_BLANK.match(line):
        return True, ""
    if _DEPTH2_CONTENT.match(line):
        return True, _DEPTH2_PREFIX.sub("", line, count=1)
    if _DEPTH1_BLANK.match(line):
        return True, None
    return False, None


def scan_callout(lines: List[str], start: int) -> ScanResult:
    """Parse the callout whose start line is ``lines[start]``."""
    front: List[str] = []
    back: List[str] = []
    hint: List[str] = []

    first = CALLOUT_START.sub("", lines[start], count=1).strip()
    if first:
        front.append(first)

    i = start + 1
    state = ScanState.FRONT
    while i < len(lines) and state in (ScanState.FRONT, ScanState.BACK, ScanState.HINT):
        line = lines[i]

        if state is ScanState.FRONT:
            if _ANSWER_HEADER.match(line):
                state = ScanState.BACK
            elif _DEPTH1_BLANK.match(line):
                # leading blank lines are dropped
                if front:
                    front.append("")
            elif line.startswith(">") and not _DEPTH2_PREFIX.match(line):
                front.append(_DEPTH1_PREFIX.sub("", line, count=1))
            else:
                return ScanResult(None, i)
            i += 1
            continue

        if state is ScanState.BACK and _HINT_HEADER.match(line):
            state = ScanState.HINT
            i += 1
            continue

        continues, content = _section_line(line)
        if not continues:
            state = ScanState.METADATA
            continue
        if content is not None:
            (back if state is ScanState.BACK else hint).append(content)
        i += 1

    if state is ScanState.FRONT:
        # ran out of lines before the answer header
        return ScanResult(None, i)

    card_id = None
    flagged = False
    if i < len(lines) and is_metadata_line(lines[i]):
        card_id, flagged = parse_markers(lines[i])
        i += 1

    card = build_flashcard(join_section(front), join_section(back), join_section(hint), card_id, flagged)
    return ScanResult(card, i)


def parse_callouts(lines: List[str]) -> List[Flashcard]:
    """Every callout flashcard in ``lines``, in document order."""
    cards: List[Flashcard] = []
    i = 0
    while i < len(lines):
        if not is_callout_start(lines[i]):
            i += 1
            continue
        try:
            card, next_index = scan_callout(lines, i)
        except Exception as e:
            logger.warning("Skipping malformed callout flashcard", extra={"line": i + 1, "error": str(e)})
            i += 1
            continue
        if card is None:
            logger.debug("Discarded incomplete callout flashcard", extra={"line": i + 1})
        else:
            cards.append(card)
        i = max(next_index, i + 1)
    return cards
