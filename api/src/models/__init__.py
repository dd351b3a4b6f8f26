"""Data models for the FastAPI service.

This package contains Pydantic models for stored records and for
request/response validation.
"""

from api.src.models.common import ErrorResponse, ReadinessResponse
from api.src.models.task import Task, TaskCreate, TaskStatus
from api.src.models.user import User, UserCreate

__all__ = [
    "ErrorResponse",
    "ReadinessResponse",
    "Task",
    "TaskCreate",
    "TaskStatus",
    "User",
    "UserCreate",
]
