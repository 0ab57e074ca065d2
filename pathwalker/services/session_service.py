"""Walker session service holding live interactive sessions in memory."""

import logging
import threading
import uuid
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Optional, Union

from pathwalker.config import get_settings
from pathwalker.core.grid import Direction, Grid
from pathwalker.core.path_walker import MoveResult, PathWalker, WalkerState

logger = logging.getLogger(__name__)


class WalkerSession:
    """A live interactive walk over one map."""

    def __init__(self, session_id: str, grid: Grid, map_name: Optional[str] = None):
        self.id = session_id
        self.map_name = map_name
        self.wrong_moves = 0
        self.created_at = datetime.now(timezone.utc)
        self.completed_at: Optional[datetime] = None
        self.walker = PathWalker(grid, on_wrong_move=self._record_wrong_move)

    @property
    def status(self) -> str:
        return "completed" if self.walker.completed else "active"

    @property
    def state(self) -> WalkerState:
        return self.walker.current_state()

    def _record_wrong_move(self) -> None:
        self.wrong_moves += 1


class SessionService:
    """
    In-memory registry of walker sessions.

    Moves on a session are serialized by the service lock. When the number
    of sessions exceeds max_sessions the oldest one is dropped.
    """

    def __init__(self, max_sessions: int = 1000):
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, WalkerSession] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def create_session(
        self,
        grid: Grid,
        map_name: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> WalkerSession:
        """
        Create a new walker session.

        Args:
            grid: Character grid to walk.
            map_name: Name of the bundled map the grid came from, if any.
            session_id: Optional custom session ID. If not provided, generates one.

        Raises:
            NoStartError: If the grid has no start character.
            NoValidPathFromStartError: If nothing continues from the start.
        """
        if session_id is None:
            session_id = f"sess_{uuid.uuid4().hex[:12]}"

        session = WalkerSession(session_id, grid, map_name=map_name)

        with self._lock:
            self._sessions[session_id] = session
            while len(self._sessions) > self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.info(f"Evicted walker session {evicted_id} (limit {self.max_sessions})")

        logger.info(f"Created walker session {session_id} (map: {map_name or 'inline'})")
        return session

    def get_session(self, session_id: str) -> Optional[WalkerSession]:
        """Get session by ID."""
        return self._sessions.get(session_id)

    def move(self, session_id: str, direction: Union[Direction, str]) -> MoveResult:
        """
        Move a session one step.

        Raises:
            KeyError: If the session doesn't exist.
            WalkerCompletedError: If the session already reached the end.
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise KeyError(session_id)

            result = session.walker.move(direction)
            if result.status == "completed":
                session.completed_at = datetime.now(timezone.utc)
                logger.info(
                    f"Walker session {session_id} completed in {session.walker.steps} steps "
                    f"(letters: {result.state.letters!r})"
                )
            return result

    def end_session(self, session_id: str) -> bool:
        """End and remove a session."""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None


# Singleton instance
_session_service: Optional[SessionService] = None


def get_session_service() -> SessionService:
    """Get singleton session service."""
    global _session_service
    if _session_service is None:
        _session_service = SessionService(max_sessions=get_settings().max_sessions)
    return _session_service
