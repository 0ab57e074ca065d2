"""Map schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class MapPosition(BaseModel):
    """Schema for a position in the map."""

    x: int
    y: int


class MapListItem(BaseModel):
    """Schema for map list item (without rows)."""

    name: str
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)


class MapListResponse(BaseModel):
    """Schema for map list response."""

    maps: list[MapListItem]
    total: int


class MapDetail(MapListItem):
    """Schema for detailed map response with rows."""

    rows: list[str]
    start: MapPosition
    ends: list[MapPosition]


class MapSource(BaseModel):
    """Schema for requests that take either inline rows or a bundled map name."""

    map: Optional[list[str]] = Field(
        None,
        min_length=1,
        description="Map rows, top to bottom. Leading spaces are significant.",
    )
    map_name: Optional[str] = Field(None, min_length=1, description="Name of a bundled map")

    @model_validator(mode="after")
    def check_exactly_one_source(self) -> "MapSource":
        """Exactly one of map and map_name must be given."""
        if (self.map is None) == (self.map_name is None):
            raise ValueError("Provide exactly one of 'map' or 'map_name'")
        return self
