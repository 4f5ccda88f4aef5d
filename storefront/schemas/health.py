"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status, database reachability and the role names authorization relies on."""

    status: Literal["ok", "degraded"] = Field(default="ok", description="Service status")
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"]
    roles: list[str] = Field(
        default_factory=list,
        description="Role names present in the store; empty when the database is unreachable",
    )
