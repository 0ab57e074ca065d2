"""
Batch path solver.

Walks a validated map from the start character to the first end character
reached, recording every character visited and the letters collected on
the way.

Turn rules:
    - At a '+', keep going straight if the cell ahead is enterable.
    - Otherwise take the first of up, down, left, right (never reversing)
      whose next cell is enterable.
    - Letters never force a turn; the walk continues in the same direction.
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import (
    InvalidPositionError,
    MaxStepsExceededError,
    NoValidTurnError,
    PathWalkerError,
)
from .grid import (
    END_CHAR,
    START_CHAR,
    TURN_CHAR,
    Direction,
    Grid,
    Position,
    can_continue,
    char_at,
    find_start,
    initial_direction,
    is_legal_for_direction,
    is_letter,
)
from .map_parser import load_map_file, validate_map

logger = logging.getLogger(__name__)

MAX_STEPS = 1000


@dataclass
class PathResult:
    """Result of walking a map."""
    path: str
    letters: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"path": self.path, "letters": self.letters}


@dataclass
class _WalkState:
    """Accumulators owned by a single solve call."""
    position: Position
    direction: Direction
    path: str = START_CHAR
    letters: str = ""
    visited_letters: set[Position] = field(default_factory=set)
    steps: int = 0


def next_direction(grid: Grid, position: Position, direction: Direction) -> Direction:
    """
    Resolve the direction to leave a cell in.

    Only turn cells change direction. At a turn, straight ahead wins when
    possible; otherwise the first non-reversing direction in up, down,
    left, right order whose next cell is enterable.

    Raises:
        NoValidTurnError: If a turn offers no continuation.
    """
    if char_at(grid, position) != TURN_CHAR:
        return direction

    if can_continue(grid, position, direction):
        return direction

    for candidate in Direction:
        if candidate is direction.opposite:
            continue
        if can_continue(grid, position, candidate):
            return candidate

    raise NoValidTurnError(position)


def solve(grid: Grid, max_steps: int = MAX_STEPS) -> PathResult:
    """
    Walk the map and return the path string and collected letters.

    Args:
        grid: Character grid (rows may have different lengths).
        max_steps: Upper bound on steps before giving up.

    Returns:
        PathResult with the visited characters and collected letters.

    Raises:
        MapValidationError: If the map fails validation.
        TraversalError: If the walk hits a dead end, an unresolvable turn,
            or runs out of steps.
    """
    validate_map(grid)

    start = find_start(grid)
    state = _WalkState(position=start, direction=initial_direction(grid, start))

    while state.steps < max_steps:
        state.steps += 1
        next_pos = state.position.move(state.direction)
        char = char_at(grid, next_pos)

        if not is_legal_for_direction(char, state.direction):
            raise InvalidPositionError(next_pos, state.direction)

        state.position = next_pos
        state.path += char

        if is_letter(char) and next_pos not in state.visited_letters:
            state.letters += char
            state.visited_letters.add(next_pos)

        if char == END_CHAR:
            logger.debug(
                f"Solved map in {state.steps} steps: "
                f"letters={state.letters!r} path={state.path!r}"
            )
            return PathResult(path=state.path, letters=state.letters)

        state.direction = next_direction(grid, state.position, state.direction)

    raise MaxStepsExceededError(max_steps)


def main(argv: Optional[list[str]] = None) -> int:
    """Solve each map file given on the command line."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("usage: python -m pathwalker.core.path_solver MAP_FILE [MAP_FILE ...]")
        return 2

    status = 0
    for file_name in argv:
        try:
            parsed = load_map_file(file_name)
            result = solve(parsed.grid)
        except (FileNotFoundError, PathWalkerError) as e:
            print(f"{file_name}: error: {e}")
            status = 1
            continue
        print(f"{parsed.name}: letters={result.letters} path={result.path}")

    return status


if __name__ == "__main__":
    sys.exit(main())
