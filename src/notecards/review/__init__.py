from .session import NoActiveSessionError, ReviewSessionManager, StudySession
from .store import InMemoryMetadataStore, MetadataStore

__all__ = [
    "InMemoryMetadataStore",
    "MetadataStore",
    "NoActiveSessionError",
    "ReviewSessionManager",
    "StudySession",
]
