"""Health-related Pydantic schemas."""

from enum import Enum

from pydantic import BaseModel, Field


class ReadinessStatus(str, Enum):
    """Readiness status enumeration."""
    READY = "ready"


class ReadinessResponse(BaseModel):
    """Readiness check response schema."""

    status: ReadinessStatus = Field(..., description="Service readiness")
    service: str = Field(..., description="Service name")
    checks: dict[str, str] = Field(..., description="Per-dependency check results")
