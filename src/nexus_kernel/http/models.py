"""
Response Envelope Models
Consistent response structure across all endpoints
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """
    Error detail structure for API responses.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        details: Additional error context (optional)
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(None, description="Additional error context")


class Envelope(BaseModel):
    """
    Wrapper for every response: success flag, optional data, optional error.
    """

    model_config = ConfigDict(frozen=True)

    success: bool = Field(..., description="Whether the operation succeeded")
    data: Any = Field(None, description="Response payload")
    error: ErrorDetail | None = Field(None, description="Error, when success is false")
