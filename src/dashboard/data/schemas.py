"""
Pydantic models for the JSON shapes the orchestrator API returns.
"""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field, StrictStr, field_validator


class APIErrorBody(BaseModel):
    """Standard error response body: {"error": ..., "code": ...}."""

    error: StrictStr
    code: StrictStr


class PaginatedResponse(BaseModel):
    """A page of items with pagination metadata."""

    items: List[Any] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    per_page: int = 0

    @field_validator("items", mode="before")
    @classmethod
    def null_items_as_empty(cls, value):
        # The server encodes an empty page as null
        return [] if value is None else value


class HealthResponse(BaseModel):
    """Response body of the /healthz endpoint."""

    status: str
    timestamp: str = ""
