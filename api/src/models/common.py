"""Response schemas shared by all routers."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""
    status: str = Field(
        default="error",
        description="Always \"error\""
    )
    detail: str = Field(
        ...,
        min_length=1,
        description="Error message"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "error",
                "detail": "Could not find user with id 42"
            }
        }
    }


class ReadinessResponse(BaseModel):
    """Readiness probe response schema."""
    status: str = Field(..., description="Service status")

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "Operational"
            }
        }
    }
