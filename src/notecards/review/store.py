"""
Metadata store interface used by review sessions.

The real store lives with the host application; anything with these three
methods works. Read-modify-write of one card must be serialized by the store.
"""
from __future__ import annotations

import threading
from typing import Dict, Iterable, Optional, Protocol

from ..scheduling.models import FlashcardMetadata


class MetadataStore(Protocol):
    def get(self, card_id: str) -> Optional[FlashcardMetadata]: ...

    def set(self, metadata: FlashcardMetadata) -> None: ...

    def get_many(self, card_ids: Iterable[str]) -> Dict[str, FlashcardMetadata]: ...


class InMemoryMetadataStore:
    """Dict-backed store, keyed by card id."""

    def __init__(self, initial: Optional[Iterable[FlashcardMetadata]] = None) -> None:
        self._cards: Dict[str, FlashcardMetadata] = {}
        self._lock = threading.Lock()
        for metadata in initial or ():
            self._cards[metadata.id] = metadata

    def get(self, card_id: str) -> Optional[FlashcardMetadata]:
        with self._lock:
            return self._cards.get(card_id)

    def set(self, metadata: FlashcardMetadata) -> None:
        with self._lock:
            self._cards[metadata.id] = metadata

    def get_many(self, card_ids: Iterable[str]) -> Dict[str, FlashcardMetadata]:
        with self._lock:
            return {cid: self._cards[cid] for cid in card_ids if cid in self._cards}

    def delete(self, card_id: str) -> None:
        with self._lock:
            self._cards.pop(card_id, None)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._cards
