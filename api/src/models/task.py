"""
Task models.

Provides Pydantic schemas for:
- Task status values
- Stored task records
- Task creation requests
"""

from enum import IntEnum

from pydantic import BaseModel, Field, field_validator

from api.src.models.user import validate_alphanumeric


class TaskStatus(IntEnum):
    """
    Named task workflow statuses. Stored statuses are plain integers and
    are not limited to these values.

    - TODO (0): not started
    - IN_PROGRESS (1): being worked on
    - DONE (2): finished
    """
    TODO = 0
    IN_PROGRESS = 1
    DONE = 2


class Task(BaseModel):
    """Stored task record."""
    id: int = Field(..., description="Task ID")
    title: str = Field(..., description="Task title")
    description: str = Field(..., description="Task description")
    status: int = Field(
        default=TaskStatus.TODO.value,
        description="Any integer; named values are 0 = ToDo, 1 = InProgress, 2 = Done"
    )
    assignee_id: int = Field(default=0, description="ID of the assigned user")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "title": "Setup CI/CD Pipeline",
                "description": "Configure automated build and deployment pipeline.",
                "status": 0,
                "assignee_id": 2
            }
        }
    }


class TaskCreate(BaseModel):
    """
    Create task request schema.

    The ID is assigned by the server; an ``id`` sent by the client is
    ignored like any other unknown field.
    """
    title: str = Field(
        ...,
        min_length=3,
        max_length=30,
        description="Task title (3-30 letters or digits)"
    )
    description: str = Field(
        ...,
        min_length=3,
        max_length=255,
        description="Task description (3-255 letters or digits)"
    )
    status: int = Field(
        default=TaskStatus.TODO.value,
        strict=True,
        description="Any integer; named values are 0 = ToDo, 1 = InProgress, 2 = Done"
    )
    assignee_id: int = Field(
        default=0,
        strict=True,
        description="ID of the assigned user"
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate title format."""
        return validate_alphanumeric(v, "title")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Validate description format."""
        return validate_alphanumeric(v, "description")

    def to_task(self, task_id: int) -> Task:
        """Build the stored record for this request under the given ID."""
        return Task(
            id=task_id,
            title=self.title,
            description=self.description,
            status=self.status,
            assignee_id=self.assignee_id,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "WriteRunbook",
                "description": "DocumentTheOnCallProcedure",
                "status": 0,
                "assignee_id": 3
            }
        }
    }
