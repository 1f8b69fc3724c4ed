"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ConnectionIn(BaseModel):
    """One connection as produced by the text service. Every field may be missing."""

    model_config = ConfigDict(populate_by_name=True)

    source: str | None = Field(default=None, alias="from", description="Source concept")
    target: str | None = Field(default=None, alias="to", description="Target concept")
    label: str | None = Field(default=None, description="Relationship description")


class LayoutRequest(BaseModel):
    connections: list[ConnectionIn] = Field(default_factory=list)
    width: float = Field(..., ge=0, description="Container width")
    height: float = Field(..., ge=0, description="Container height")
