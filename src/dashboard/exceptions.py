"""
Exception hierarchy for the orchestrator dashboard.

The API client raises `APIClientError` for every non-success HTTP response;
network failures are left as the underlying httpx exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dashboard.data.schemas import APIErrorBody


class DashboardError(Exception):
    """Base exception for all dashboard errors."""


class APIClientError(DashboardError):
    """
    Non-success response from the orchestrator API.

    Attributes:
        status: HTTP status code of the response.
        code: Machine-readable error code ("UNKNOWN" when the body was unusable).
        message: Human-readable message, also used as the exception text.
    """

    UNKNOWN_CODE = "UNKNOWN"

    def __init__(self, status: int, code: str, message: str):
        super().__init__(message)
        self.status = status
        self.code = code
        self.message = message

    @classmethod
    def from_body(cls, status: int, body: "APIErrorBody") -> "APIClientError":
        return cls(status, code=body.code, message=body.error)

    @classmethod
    def unknown(cls, status: int, reason_phrase: str) -> "APIClientError":
        return cls(status, code=cls.UNKNOWN_CODE, message=f"HTTP {status}: {reason_phrase}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status!r}, code={self.code!r}, message={self.message!r})"
