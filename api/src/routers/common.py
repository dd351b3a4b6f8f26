"""Pieces shared by the resource routers."""

import structlog
from fastapi import HTTPException, Path, status

from api.src.models.common import ErrorResponse
from api.src.utils.params import parse_integer_param

logger = structlog.get_logger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid ID or request body"},
    404: {"model": ErrorResponse, "description": "Not Found"},
}


def get_record_id(
    record_id: str = Path(..., description="Integer record ID")
) -> int:
    """
    Parse the ``record_id`` path parameter.

    Raises:
        HTTPException: 400 if the value is not a base-10 integer
    """
    parsed = parse_integer_param(record_id)
    if not parsed.ok:
        logger.warning("invalid_record_id", raw=record_id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid ID '{parsed.raw}'"
        )
    return parsed.value
