from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StatusResponse(BaseModel):
    """Single-field payload returned by every CommitAI endpoint."""

    model_config = ConfigDict(frozen=True)

    status: str = Field(..., min_length=1, description="Fixed message for the endpoint")
