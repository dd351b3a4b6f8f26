"""
Tasks router.

Provides REST API endpoints to list, fetch and create tasks.
"""

import structlog
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status

from api.src.dependencies import get_metrics, get_task_repository
from api.src.models.task import Task, TaskCreate
from api.src.repositories.memory_store import InMemoryRepository
from api.src.routers.common import ERROR_RESPONSES, get_record_id
from shared.metrics import HTTPMetrics

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
    responses=ERROR_RESPONSES,
)


@router.get(
    "/",
    response_model=List[Task],
    summary="Get Tasks",
    description="List every task in insertion order.",
)
async def list_tasks(
    repo: InMemoryRepository[Task] = Depends(get_task_repository)
) -> List[Task]:
    return repo.list_all()


@router.get(
    "/{record_id}",
    response_model=Task,
    summary="Get Task",
    description="Fetch one task by its integer ID.",
)
async def get_task(
    task_id: int = Depends(get_record_id),
    repo: InMemoryRepository[Task] = Depends(get_task_repository)
) -> Task:
    task = repo.get_by_id(task_id)
    if task is None:
        logger.info("task_not_found", task_id=task_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find task with id {task_id}"
        )
    return task


@router.post(
    "/",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
    description="""
    Create a new task. The ID is assigned by the server; an ``id`` in the
    request body is ignored.

    **Request Body:**
    - title: 3-30 letters or digits
    - description: 3-255 letters or digits
    - status: integer, 0 (ToDo), 1 (InProgress) or 2 (Done) by convention, default 0
    - assignee_id: integer, default 0
    """,
)
async def create_task(
    task_in: TaskCreate,
    repo: InMemoryRepository[Task] = Depends(get_task_repository),
    metrics: Optional[HTTPMetrics] = Depends(get_metrics)
) -> Task:
    task = repo.create(task_in.to_task)

    if metrics is not None:
        metrics.records_created.labels(collection="tasks").inc()

    logger.info(
        "task_created",
        task_id=task.id,
        status=task.status,
        assignee_id=task.assignee_id
    )
    return task
