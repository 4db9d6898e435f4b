from __future__ import annotations

import logging
from typing import List, Optional

from .callout import parse_callouts
from .models import Flashcard
from .spaced import parse_inline, parse_multiline
from ..config_models import ParserConfig

logger = logging.getLogger(__name__)


def parse_flashcards(
        document_text: str,
        config: Optional[ParserConfig] = None,
        source_file: Optional[str] = None,
) -> List[Flashcard]:
    """Extract every flashcard from a note, in any supported notation.

    Results are callout cards first, then inline, then multiline. The scanners
    run independently over the whole text. Malformed candidates are skipped;
    this function does not raise on any input text.
    """
    config = config or ParserConfig()
    if not document_text:
        return []

    text = document_text.replace("\r\n", "\n")
    lines = text.split("\n")

    cards: List[Flashcard] = []
    for name, scan in (
        ("callout", lambda: parse_callouts(lines)),
        ("inline", lambda: parse_inline(text, config.inline_separator)),
        ("multiline", lambda: parse_multiline(lines, config)),
    ):
        try:
            found = scan()
        except Exception as e:
            logger.warning("Flashcard scanner failed", extra={"notation": name, "error": str(e)})
            continue
        cards.extend(found)

    if source_file is not None:
        for card in cards:
            card.source_file = source_file

    logger.debug("Parsed flashcards", extra={"count": len(cards), "source_file": source_file})
    return cards
