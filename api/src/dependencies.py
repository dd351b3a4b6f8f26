"""
FastAPI dependency injection for the record store and metrics.

Provides injectable dependencies for:
- The application's record store and its repositories
- Metrics

The store is created by the application factory and kept on
``app.state``, so each application instance (and each test) gets its own.
"""

import structlog
from typing import Optional
from fastapi import Depends, Request

from api.src.models.task import Task
from api.src.models.user import User
from api.src.repositories.memory_store import InMemoryRepository, RecordStore
from shared.metrics import HTTPMetrics

logger = structlog.get_logger(__name__)


# ============================================================================
# STORE DEPENDENCIES
# ============================================================================


def get_store(request: Request) -> RecordStore:
    """
    Get the record store of the running application.

    Args:
        request: HTTP request

    Returns:
        Record store

    Raises:
        RuntimeError: If the application was built without a store
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        logger.error("record_store_not_initialized")
        raise RuntimeError("Record store not initialized. Build the app with create_app().")
    return store


def get_user_repository(
    store: RecordStore = Depends(get_store)
) -> InMemoryRepository[User]:
    """
    Get user repository instance.

    Example:
        @router.get("/{record_id}")
        async def get_user(
            user_id: int = Depends(get_record_id),
            repo: InMemoryRepository[User] = Depends(get_user_repository)
        ):
            ...
    """
    return store.users


def get_task_repository(
    store: RecordStore = Depends(get_store)
) -> InMemoryRepository[Task]:
    """Get task repository instance."""
    return store.tasks


# ============================================================================
# UTILITY DEPENDENCIES
# ============================================================================


def get_metrics(request: Request) -> Optional[HTTPMetrics]:
    """Get the application's metrics, or None when metrics are disabled."""
    return getattr(request.app.state, "metrics", None)
