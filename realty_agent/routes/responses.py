"""Helpers for building JSON error responses."""

from typing import Optional

from fastapi.responses import JSONResponse

from realty_agent.models.webhook_schemas import ErrorResponse


def error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    """Return ``{"error", "details"?}`` with the given status code."""
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))
