"""
In-memory record repositories.

Provides thread-safe list, lookup and create operations over ordered
collections of users and tasks. State lives as long as the owning
application instance and is lost on shutdown.
"""

import threading
import structlog
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from api.src.models.task import Task
from api.src.models.user import User
from api.src.repositories.seed import seed_tasks, seed_users
from api.src.utils.ids import next_object_id

logger = structlog.get_logger(__name__)

T = TypeVar("T", User, Task)


class InMemoryRepository(Generic[T]):
    """Repository for one ordered collection of records keyed by integer ID."""

    def __init__(self, name: str, records: Optional[Iterable[T]] = None):
        """
        Initialize repository.

        Args:
            name: Collection name used in log entries
            records: Initial records, kept in the given order
        """
        self.name = name
        self._records: List[T] = list(records or [])
        self._lock = threading.Lock()

    def list_all(self) -> List[T]:
        """
        List every record in insertion order.

        Returns:
            Snapshot copy of the collection
        """
        with self._lock:
            return list(self._records)

    def get_by_id(self, record_id: int) -> Optional[T]:
        """
        Get record by ID.

        Args:
            record_id: Record ID

        Returns:
            First record with that ID, or None if not found
        """
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record

        logger.debug("record_not_found", collection=self.name, record_id=record_id)
        return None

    def create(self, build: Callable[[int], T]) -> T:
        """
        Allocate the next ID and append the record built for it.

        Allocation and append happen under one lock, so concurrent
        creates never share an ID.

        Args:
            build: Builds the record to store from its new ID

        Returns:
            Created record
        """
        with self._lock:
            new_id = next_object_id(self._records, lambda record: record.id)
            record = build(new_id)
            self._records.append(record)

        logger.info("record_created", collection=self.name, record_id=record.id)
        return record

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class RecordStore:
    """Holds the user and task repositories for one application instance."""

    def __init__(
        self,
        users: Optional[Iterable[User]] = None,
        tasks: Optional[Iterable[Task]] = None,
    ):
        self.users: InMemoryRepository[User] = InMemoryRepository("users", users)
        self.tasks: InMemoryRepository[Task] = InMemoryRepository("tasks", tasks)

    @classmethod
    def seeded(cls) -> "RecordStore":
        """Build a store holding the sample users and tasks."""
        return cls(users=seed_users(), tasks=seed_tasks())
