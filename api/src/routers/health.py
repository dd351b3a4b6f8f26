"""Readiness probe."""

from fastapi import APIRouter

from api.src.models.common import ReadinessResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/readiness",
    response_model=ReadinessResponse,
    summary="Readiness",
    description="Report that the service is up and able to serve traffic.",
)
async def readiness_check() -> ReadinessResponse:
    return ReadinessResponse(status="Operational")
