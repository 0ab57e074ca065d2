"""Exceptions raised by map validation, traversal and walker sessions."""

from typing import Optional


class PathWalkerError(Exception):
    """Base exception for all path walker failures."""

    code = "path_walker_error"


class MapParseError(PathWalkerError):
    """Exception raised when map text cannot be read or parsed."""

    code = "map_parse_error"


class MapValidationError(PathWalkerError):
    """Exception raised when a map fails the whole-map checks."""

    code = "map_validation_error"


class InvalidCharacterError(MapValidationError):
    """A non-space, non-path character appears in the map."""

    code = "invalid_character"

    def __init__(self, character: str, position) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid character '{character}' found at position "
            f"({position.x}, {position.y})"
        )


class NoStartError(MapValidationError):
    """The map has no start character."""

    code = "no_start"


class MultipleStartsError(MapValidationError):
    """The map has more than one start character."""

    code = "multiple_starts"


class NoEndError(MapValidationError):
    """The map has no end character."""

    code = "no_end"


class TraversalError(PathWalkerError):
    """Exception raised when walking a validated map fails."""

    code = "traversal_error"


class NoValidPathFromStartError(TraversalError):
    """No neighbour of the start continues the path."""

    code = "no_valid_path_from_start"


class InvalidPositionError(TraversalError):
    """The next cell is absent or not enterable along the current axis."""

    code = "invalid_position"

    def __init__(self, position, direction) -> None:
        self.position = position
        self.direction = direction
        super().__init__(
            f"Path leads to invalid position ({position.x}, {position.y}) "
            f"moving {direction.value}"
        )


class NoValidTurnError(TraversalError):
    """A turn offers no continuation other than reversing."""

    code = "no_valid_turn"

    def __init__(self, position) -> None:
        self.position = position
        super().__init__(f"No valid turn found at + ({position.x}, {position.y})")


class MaxStepsExceededError(TraversalError):
    """The walk did not reach the end within the step bound."""

    code = "max_steps_exceeded"

    def __init__(self, max_steps: int, message: Optional[str] = None) -> None:
        self.max_steps = max_steps
        super().__init__(
            message or f"Maximum steps ({max_steps}) exceeded - possible infinite loop"
        )


class WalkerCompletedError(PathWalkerError):
    """A move was issued on a walker that already reached the end."""

    code = "walker_completed"
