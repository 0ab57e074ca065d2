# Core module
from .exceptions import (
    InvalidCharacterError,
    InvalidPositionError,
    MapParseError,
    MapValidationError,
    MaxStepsExceededError,
    MultipleStartsError,
    NoEndError,
    NoStartError,
    NoValidPathFromStartError,
    NoValidTurnError,
    PathWalkerError,
    TraversalError,
    WalkerCompletedError,
)
from .grid import (
    END_CHAR,
    START_CHAR,
    Direction,
    Grid,
    Position,
    char_at,
    is_legal_for_direction,
    is_letter,
    is_path_char,
    to_grid,
)
from .map_parser import (
    ParsedMap,
    load_all_maps,
    load_map_file,
    parse_map_text,
    validate_map,
    validate_map_text,
)
from .path_solver import MAX_STEPS, PathResult, next_direction, solve
from .path_walker import MoveResult, PathWalker, WalkerState

__all__ = [
    "END_CHAR",
    "START_CHAR",
    "Direction",
    "Grid",
    "Position",
    "char_at",
    "is_legal_for_direction",
    "is_letter",
    "is_path_char",
    "to_grid",
    "ParsedMap",
    "load_all_maps",
    "load_map_file",
    "parse_map_text",
    "validate_map",
    "validate_map_text",
    "MAX_STEPS",
    "PathResult",
    "next_direction",
    "solve",
    "MoveResult",
    "PathWalker",
    "WalkerState",
    "PathWalkerError",
    "MapParseError",
    "MapValidationError",
    "InvalidCharacterError",
    "NoStartError",
    "MultipleStartsError",
    "NoEndError",
    "TraversalError",
    "NoValidPathFromStartError",
    "InvalidPositionError",
    "NoValidTurnError",
    "MaxStepsExceededError",
    "WalkerCompletedError",
]
