"""API routers mounted under the versioned prefix."""

from api.src.routers import health, tasks, users

__all__ = ["health", "tasks", "users"]
