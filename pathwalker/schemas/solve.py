"""Solve schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel

from pathwalker.schemas.map import MapSource


class SolveRequest(MapSource):
    """Schema for solve request."""

    pass


class SolveResponse(BaseModel):
    """Schema for solve response."""

    path: str
    letters: str
    map_name: Optional[str] = None
