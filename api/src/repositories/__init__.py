"""In-memory data access for users and tasks."""

from api.src.repositories.memory_store import InMemoryRepository, RecordStore

__all__ = ["InMemoryRepository", "RecordStore"]
