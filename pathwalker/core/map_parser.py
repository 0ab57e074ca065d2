"""
Map Parser for ASCII path maps.

Validates character grids and loads map files from the filesystem.

Map Format:
    @ = Start position (exactly one)
    x = End (at least one)
    -, | = Straight segments
    + = Turn
    A-Z = Letters
    (space) = Empty
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .exceptions import (
    InvalidCharacterError,
    MapParseError,
    MapValidationError,
    MultipleStartsError,
    NoEndError,
    NoStartError,
)
from .grid import END_CHAR, START_CHAR, Grid, Position, is_path_char, to_grid

logger = logging.getLogger(__name__)


@dataclass
class ParsedMap:
    """Parsed map data ready for solving or serving."""

    name: str
    grid: Grid
    width: int
    height: int
    start: Position
    ends: list[Position]

    @property
    def rows(self) -> list[str]:
        """Grid rows joined back into strings."""
        return ["".join(row) for row in self.grid]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "rows": self.rows,
            "width": self.width,
            "height": self.height,
            "start": self.start.to_dict(),
            "ends": [end.to_dict() for end in self.ends],
        }


def validate_map(grid: Grid) -> None:
    """
    Run the whole-map checks on a character grid.

    Connectivity and forks are not checked; those surface while walking.

    Raises:
        InvalidCharacterError: On the first non-space, non-path character.
        NoStartError: If there is no start character.
        MultipleStartsError: If there is more than one start character.
        NoEndError: If there is no end character.
    """
    start_count = 0
    end_count = 0

    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == START_CHAR:
                start_count += 1
            elif char == END_CHAR:
                end_count += 1
            if char != " " and not is_path_char(char):
                raise InvalidCharacterError(char, Position(x, y))

    if start_count == 0:
        raise NoStartError("Start position (@) not found")
    if start_count > 1:
        raise MultipleStartsError(
            f"Multiple start positions found ({start_count})"
        )
    if end_count == 0:
        raise NoEndError("End position (x) not found")


def parse_map_text(map_text: str, name: str = "Unnamed") -> ParsedMap:
    """
    Parse map text and extract metadata.

    Args:
        map_text: Multi-line string holding the map. Leading spaces are significant.
        name: Name of the map.

    Returns:
        ParsedMap with grid and metadata.

    Raises:
        MapParseError: If the text is empty.
        MapValidationError: If the map is invalid.
    """
    if not map_text or not map_text.strip():
        raise MapParseError("Map text is empty")

    grid = to_grid(map_text.strip("\r\n"))
    validate_map(grid)

    start: Optional[Position] = None
    ends: list[Position] = []
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == START_CHAR:
                start = Position(x, y)
            elif char == END_CHAR:
                ends.append(Position(x, y))

    return ParsedMap(
        name=name,
        grid=grid,
        width=max(len(row) for row in grid),
        height=len(grid),
        start=start,
        ends=ends,
    )


def load_map_file(file_path: Path | str, name: Optional[str] = None) -> ParsedMap:
    """
    Load and parse a map file from the filesystem.

    Args:
        file_path: Path to the map file.
        name: Optional name override. If not provided, uses the file stem.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MapParseError: If the map cannot be read or parsed.
        MapValidationError: If the map is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Map file not found: {file_path}")

    if not file_path.is_file():
        raise MapParseError(f"Path is not a file: {file_path}")

    try:
        map_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MapParseError(f"Failed to read map file: {e}") from e

    if name is None:
        name = file_path.stem

    return parse_map_text(map_text, name=name)


def load_all_maps(maps_dir: Path | str) -> list[ParsedMap]:
    """
    Load all map files (*.txt) from a directory, in name order.

    Invalid files are logged and skipped.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
    """
    maps_dir = Path(maps_dir)

    if not maps_dir.exists():
        raise FileNotFoundError(f"Maps directory not found: {maps_dir}")

    if not maps_dir.is_dir():
        raise MapParseError(f"Path is not a directory: {maps_dir}")

    maps = []
    for map_file in sorted(maps_dir.glob("*.txt")):
        try:
            maps.append(load_map_file(map_file))
        except (MapParseError, MapValidationError) as e:
            logger.warning(f"Failed to load {map_file}: {e}")

    return maps


def validate_map_text(map_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate map text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_map_text(map_text)
        return True, None
    except (MapParseError, MapValidationError) as e:
        return False, str(e)
