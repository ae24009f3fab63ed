"""
Error bodies returned by the API.

Route-level failures use FastAPI's ``{"detail": "..."}`` shape; request
validation failures add an ``error`` label and the list of field errors.
"""

from pydantic import BaseModel
from typing import Any, Optional


class ErrorResponse(BaseModel):
    """Single-message error body."""

    detail: str
    code: Optional[str] = None


class ValidationErrorResponse(BaseModel):
    """Field-level errors for a rejected request (always HTTP 400)."""

    error: str = "Validation Error"
    detail: list[dict[str, Any]]
