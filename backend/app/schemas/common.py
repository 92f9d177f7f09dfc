"""
Roster Backend — Shared Schemas and Query Helpers
===================================================

What:  Error/health response models, the camelCase base model, and lenient
       parsing of pagination query parameters.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases while accepting snake_case names too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Largest value a BIGINT / SQLite INTEGER bind parameter can hold
MAX_PAGINATION_VALUE = 2**63 - 1


def parse_pagination_value(raw: Optional[str], default: int) -> int:
    """
    Convert a raw `limit`/`offset` query value to a non-negative integer.

    Absent, non-numeric, negative or out-of-range values fall back to
    `default` instead of failing the request.

    >>> parse_pagination_value("10", 5)
    10
    >>> parse_pagination_value("-1", 5)
    5
    >>> parse_pagination_value("abc", 0)
    0
    >>> parse_pagination_value("99999999999999999999", 5)
    5
    """
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    if value < 0 or value > MAX_PAGINATION_VALUE:
        return default
    return value


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "invalid_department",
            "message": "departmentId is not a valid department for this manager",
            "details": {"field": "departmentId"},
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
