"""Session schemas for request/response validation."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from pathwalker.schemas.map import MapPosition, MapSource


class SessionCreateRequest(MapSource):
    """Schema for creating a new walker session."""

    pass


class WalkerStateResponse(BaseModel):
    """Schema for the observable walker state."""

    position: MapPosition
    letters: str
    path: str
    direction: str  # up, down, left, right


class SessionState(BaseModel):
    """Schema for session state."""

    id: str
    map_name: Optional[str] = None
    state: WalkerStateResponse
    status: str  # active, completed
    wrong_moves: int
    created_at: datetime
    completed_at: Optional[datetime] = None


class MoveRequest(BaseModel):
    """Schema for move request."""

    direction: str = Field(..., pattern="^(up|down|left|right)$")


class MoveResponse(BaseModel):
    """Schema for move response."""

    status: str  # moved, rejected, completed
    accepted: bool
    state: WalkerStateResponse
