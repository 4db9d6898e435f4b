from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class Flashcard(BaseModel):
    """A flashcard parsed from a note. Front, back and hint keep their markdown verbatim."""

    id: str = Field(..., description="Stable id, from the embedded fc-id comment or freshly generated")
    front: str = Field(..., description="Question or prompt (markdown)")
    back: str = Field(..., description="Answer or explanation (markdown)")
    hint: Optional[str] = Field(default=None, description="Optional mnemonic or hint")
    deck_id: str = Field(default="", description="Owning deck, assigned by the caller")
    flagged: bool = Field(default=False, description="Flagged for later editing or review")
    created: int = Field(..., description="Epoch milliseconds when the card was parsed")
    modified: int = Field(..., description="Epoch milliseconds of the last modification")
    tags: List[str] = Field(default_factory=list)
    source_file: Optional[str] = Field(default=None, description="Path of the note the card came from")
