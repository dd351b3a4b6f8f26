"""Response classes."""

import json
from typing import Any

from fastapi.responses import JSONResponse


class IndentedJSONResponse(JSONResponse):
    """JSON response rendered with four-space indentation."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=4,
        ).encode("utf-8")


def error_response(status_code: int, detail: str, headers=None) -> IndentedJSONResponse:
    """Build the standard error body: ``{"status": "error", "detail": ...}``."""
    return IndentedJSONResponse(
        status_code=status_code,
        content={"status": "error", "detail": detail},
        headers=headers,
    )
