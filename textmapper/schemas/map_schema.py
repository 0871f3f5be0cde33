"""
Request / response envelopes for the mapping preview endpoint.
"""

from typing import Any

from pydantic import BaseModel, Field

from textmapper.schemas import Event, StreamDefinition
from textmapper.schemas.options_schema import MapperOptions


class MapRequest(BaseModel):
    """Request body for POST /map/."""

    stream: StreamDefinition = Field(..., description="Output stream definition")
    options: MapperOptions = Field(
        default_factory=MapperOptions, description="Static mapper options"
    )
    events: list[Event | None] = Field(
        ...,
        min_length=1,
        description="Events to map; null entries are skipped",
    )


class MapResponse(BaseModel):
    """API response envelope containing the published payloads."""

    status: str = Field(default="ok")
    total_count: int = Field(default=0)
    payloads: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
