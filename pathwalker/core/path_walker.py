"""
Interactive path walker.

A stateful session that advances one cell per caller-chosen direction,
using the same cell legality rules as the batch solver. The caller picks
the exit direction at turns; nothing is inferred after the start.

Example usage:
    walker = PathWalker(grid, on_update=render, on_wrong_move=beep)

    result = walker.move(Direction.RIGHT)
    if not result.accepted:
        ...  # state unchanged
    if result.status == "completed":
        ...  # end reached, further moves raise WalkerCompletedError
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Literal, Optional, Union

from .exceptions import NoStartError, WalkerCompletedError
from .grid import (
    END_CHAR,
    START_CHAR,
    Direction,
    Grid,
    Position,
    char_at,
    find_start,
    initial_direction,
    is_legal_for_direction,
    is_letter,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkerState:
    """Observable state of a walker session."""
    position: Position
    letters: str
    path: str
    direction: Direction

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "position": self.position.to_dict(),
            "letters": self.letters,
            "path": self.path,
            "direction": self.direction.value,
        }


@dataclass
class MoveResult:
    """Result of a move attempt."""
    status: Literal["moved", "rejected", "completed"]
    state: WalkerState

    @property
    def accepted(self) -> bool:
        return self.status != "rejected"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "status": self.status,
            "accepted": self.accepted,
            "state": self.state.to_dict(),
        }


UpdateCallback = Callable[[WalkerState], None]
WrongMoveCallback = Callable[[], None]


@dataclass
class _Session:
    position: Position
    direction: Direction
    path: str = START_CHAR
    letters: str = ""
    visited_letters: set[Position] = field(default_factory=set)
    completed: bool = False


class PathWalker:
    """
    Step-by-step walker over a path map.

    The grid is not validated here; run validate_map first when the map
    comes from an untrusted source. A single walker must not be moved from
    several threads at once.
    """

    def __init__(
        self,
        grid: Grid,
        on_update: Optional[UpdateCallback] = None,
        on_wrong_move: Optional[WrongMoveCallback] = None,
    ):
        """
        Initialize the walker at the start character.

        Args:
            grid: Character grid.
            on_update: Called with the new state on start and after each accepted move.
            on_wrong_move: Called after each rejected move.

        Raises:
            NoStartError: If the grid has no start character.
            NoValidPathFromStartError: If nothing continues from the start.
        """
        self.grid = grid
        self._on_update = on_update
        self._on_wrong_move = on_wrong_move

        start = find_start(grid)
        if start is None:
            raise NoStartError("Start position (@) not found")

        self._session = _Session(position=start, direction=initial_direction(grid, start))
        self._notify()

    @property
    def completed(self) -> bool:
        """True once the end character has been entered."""
        return self._session.completed

    @property
    def steps(self) -> int:
        return len(self._session.path) - 1

    def current_state(self) -> WalkerState:
        """Get a snapshot of the session state."""
        s = self._session
        return WalkerState(
            position=s.position,
            letters=s.letters,
            path=s.path,
            direction=s.direction,
        )

    def can_move(self, direction: Union[Direction, str]) -> bool:
        """Check whether a move in direction would be accepted."""
        direction = Direction(direction)
        target = self._session.position.move(direction)
        return is_legal_for_direction(char_at(self.grid, target), direction)

    def move(self, direction: Union[Direction, str]) -> MoveResult:
        """
        Attempt to step once in direction.

        Args:
            direction: Direction or its string value ("up", "down", "left", "right").

        on_update is called after the walker's state has changed. An
        exception raised by it propagates to the caller, and the move stays
        applied.

        Returns:
            MoveResult with status "moved", "rejected" or "completed".

        Raises:
            WalkerCompletedError: If the end was already reached.
            ValueError: If direction is not a known direction.
        """
        direction = Direction(direction)
        s = self._session
        if s.completed:
            raise WalkerCompletedError("Walker already reached the end")

        if not self.can_move(direction):
            logger.debug(f"Rejected move {direction.value} from ({s.position.x}, {s.position.y})")
            if self._on_wrong_move is not None:
                self._on_wrong_move()
            return MoveResult(status="rejected", state=self.current_state())

        s.position = s.position.move(direction)
        s.direction = direction
        char = char_at(self.grid, s.position)
        s.path += char

        if is_letter(char) and s.position not in s.visited_letters:
            s.letters += char
            s.visited_letters.add(s.position)

        if char == END_CHAR:
            s.completed = True

        self._notify()
        return MoveResult(
            status="completed" if s.completed else "moved",
            state=self.current_state(),
        )

    def _notify(self) -> None:
        if self._on_update is not None:
            self._on_update(self.current_state())
