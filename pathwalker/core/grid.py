"""
Grid model for ASCII path maps.

Character classification, bounds-checked lookup and position/direction
arithmetic shared by the solver and the interactive walker.

Map Format:
    @ = Start position (exactly one)
    x = End (at least one)
    - = Horizontal segment
    | = Vertical segment
    + = Turn
    A-Z = Letter waypoint (collected once per position)
    (space) = Empty
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from .exceptions import NoValidPathFromStartError

START_CHAR = "@"
END_CHAR = "x"
TURN_CHAR = "+"
HORIZONTAL_CHAR = "-"
VERTICAL_CHAR = "|"

Grid = list[list[str]]


class Direction(Enum):
    """Movement directions, declared in tie-break order."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        deltas = {
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }
        return deltas[self]

    @property
    def opposite(self) -> "Direction":
        """Get the reverse of this direction."""
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True)
class Position:
    """2D position in the grid (column, row)."""
    x: int
    y: int

    def move(self, direction: Direction) -> "Position":
        """Return new position after stepping once in direction."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}


def is_letter(char: Optional[str]) -> bool:
    """True for uppercase A-Z only."""
    return char is not None and len(char) == 1 and "A" <= char <= "Z"


def is_path_char(char: Optional[str]) -> bool:
    """True for any character that can be part of a path."""
    return is_letter(char) or char in (
        START_CHAR,
        END_CHAR,
        TURN_CHAR,
        HORIZONTAL_CHAR,
        VERTICAL_CHAR,
    )


def char_at(grid: Grid, position: Position) -> Optional[str]:
    """Get the character at position, or None outside the grid or past a row's end."""
    if not (0 <= position.y < len(grid) and 0 <= position.x < len(grid[position.y])):
        return None
    return grid[position.y][position.x]


def is_legal_for_direction(char: Optional[str], direction: Direction) -> bool:
    """
    Check whether a cell may be entered while travelling in direction.

    Letters, turns and the end character accept any approach. Straight
    segments must match the axis of travel.
    """
    if char is None:
        return False
    if is_letter(char) or char in (TURN_CHAR, END_CHAR):
        return True
    if direction.is_horizontal:
        return char == HORIZONTAL_CHAR
    return char == VERTICAL_CHAR


def can_continue(grid: Grid, position: Position, direction: Direction) -> bool:
    """Check whether the neighbour of position in direction is enterable."""
    return is_legal_for_direction(char_at(grid, position.move(direction)), direction)


def find_start(grid: Grid) -> Optional[Position]:
    """Find the first start character in row-major order."""
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == START_CHAR:
                return Position(x, y)
    return None


def initial_direction(grid: Grid, start: Position) -> Direction:
    """
    Pick the direction to leave the start in.

    The first neighbour (up, down, left, right) holding a segment, turn or
    letter wins. The axis of a segment is not checked here.

    Raises:
        NoValidPathFromStartError: If no neighbour continues the path.
    """
    for direction in Direction:
        char = char_at(grid, start.move(direction))
        if char in (HORIZONTAL_CHAR, VERTICAL_CHAR, TURN_CHAR) or is_letter(char):
            return direction
    raise NoValidPathFromStartError(
        f"No valid path found from start position ({start.x}, {start.y})"
    )


def to_grid(lines: Union[str, Iterable[str]]) -> Grid:
    """
    Build a character grid from map text or a sequence of row strings.

    Leading spaces and uneven row lengths are preserved.
    """
    if isinstance(lines, str):
        lines = lines.split("\n")
    return [list(line.rstrip("\r")) for line in lines]
