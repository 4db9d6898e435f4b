from __future__ import annotations

from enum import Enum, auto
from typing import List, NamedTuple, Optional

from .models import Flashcard
from ..common.ids import generate_card_id, now_ms


class ScanState(Enum):
    """Where a card scanner is within one candidate."""
    SCAN = auto()
    FRONT = auto()
    BACK = auto()
    HINT = auto()
    METADATA = auto()


class ScanResult(NamedTuple):
    """Outcome of scanning one candidate. ``next_index`` is always past the start line."""
    flashcard: Optional[Flashcard]
    next_index: int


def join_section(lines: List[str]) -> str:
    return "\n".join(lines).strip()


def build_flashcard(
        front: str,
        back: str,
        hint: Optional[str],
        card_id: Optional[str],
        flagged: bool,
) -> Optional[Flashcard]:
    """Create a card, or None when front or back is empty after trimming."""
    front = front.strip()
    back = back.strip()
    if not front or not back:
        return None
    hint = hint.strip() if hint else None
    stamp = now_ms()
    return Flashcard(
        id=card_id.strip() if card_id and card_id.strip() else generate_card_id(stamp),
        front=front,
        back=back,
        hint=hint or None,
        flagged=flagged,
        created=stamp,
        modified=stamp,
    )
