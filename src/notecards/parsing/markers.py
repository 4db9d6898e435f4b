"""
Embedded HTML-comment micro-format that carries card identity through edits.

    <!--fc-id:VALUE-->        stable card id
    <!--fc-flagged:true-->    card is flagged
    <!--Hint: TEXT-->         hint for spaced-repetition notation

Round-tripping depends on these being written and read byte-for-byte.
"""
from __future__ import annotations

import re
from typing import NamedTuple, Optional

METADATA_PREFIX = "<!--fc-"

_ID = re.compile(r"<!--fc-id:([^<>]+)-->")
_FLAGGED = re.compile(r"<!--fc-flagged:true-->")
_HINT_LINE = re.compile(r"^<!--Hint:(.*?)-->")
_COMMENT_LINE = re.compile(r"^<!--(?:Hint:|fc-)")


class CardMarkers(NamedTuple):
    card_id: Optional[str]
    flagged: bool


def is_metadata_line(line: str) -> bool:
    """A standalone comment line carrying fc- markers, not a card line that ends with them."""
    return line.lstrip().startswith("<!--") and METADATA_PREFIX in line


def is_comment_line(line: str) -> bool:
    """True for lines that open with a hint or fc- comment."""
    return _COMMENT_LINE.match(line) is not None


def parse_markers(line: str) -> CardMarkers:
    """Read id and flagged markers from ``line``. Unparseable markers are ignored."""
    id_match = _ID.search(line)
    return CardMarkers(
        card_id=id_match.group(1) if id_match else None,
        flagged=_FLAGGED.search(line) is not None,
    )


def parse_hint_line(line: str) -> Optional[str]:
    match = _HINT_LINE.match(line)
    if match is None:
        return None
    return match.group(1).strip()


def format_markers(card_id: str, flagged: bool = False) -> str:
    out = f"<!--fc-id:{card_id}-->"
    if flagged:
        out += "<!--fc-flagged:true-->"
    return out


def format_hint(hint: str) -> str:
    return f"<!--Hint: {hint.strip()}-->"
