"""
Users router.

Provides REST API endpoints to list, fetch and create users.
"""

import structlog
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status

from api.src.dependencies import get_metrics, get_user_repository
from api.src.models.user import User, UserCreate
from api.src.repositories.memory_store import InMemoryRepository
from api.src.routers.common import ERROR_RESPONSES, get_record_id
from shared.metrics import HTTPMetrics

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses=ERROR_RESPONSES,
)


@router.get(
    "/",
    response_model=List[User],
    summary="Get Users",
    description="List every user in insertion order.",
)
async def list_users(
    repo: InMemoryRepository[User] = Depends(get_user_repository)
) -> List[User]:
    return repo.list_all()


@router.get(
    "/{record_id}",
    response_model=User,
    summary="Get User",
    description="Fetch one user by its integer ID.",
)
async def get_user(
    user_id: int = Depends(get_record_id),
    repo: InMemoryRepository[User] = Depends(get_user_repository)
) -> User:
    """
    Get a user by ID.

    Raises:
        HTTPException: 404 if no user has that ID
    """
    user = repo.get_by_id(user_id)
    if user is None:
        logger.info("user_not_found", user_id=user_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find user with id {user_id}"
        )
    return user


@router.post(
    "/",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="""
    Create a new user. The ID is assigned by the server.

    **Request Body:**
    - username: 3-15 letters or digits
    - full_name: 3-30 letters or digits
    """,
)
async def create_user(
    user_in: UserCreate,
    repo: InMemoryRepository[User] = Depends(get_user_repository),
    metrics: Optional[HTTPMetrics] = Depends(get_metrics)
) -> User:
    user = repo.create(user_in.to_user)

    if metrics is not None:
        metrics.records_created.labels(collection="users").inc()

    logger.info("user_created", user_id=user.id, username=user.username)
    return user
