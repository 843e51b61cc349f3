"""
Shut the Box - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence


def _require_int(value: object, what: str) -> int:
    # bool is an int subclass but never a die face or a tile label
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {type(value).__name__}.")
    return value


def validate_die_values(d1: int, d2: int = 0, faces: int = 6) -> tuple[int, int]:
    """
    Validate an observed pair of die faces.

    Args:
        d1: First die value, must be 1..faces
        d2: Second die value, 0 when only one die is in play, else 1..faces
        faces: Number of faces on each die

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If either value is not an integer or is out of range
    """
    _require_int(d1, "First die value")
    _require_int(d2, "Second die value")

    if not (1 <= d1 <= faces):
        raise ValueError(
            f"First die value is {d1}, must be between 1 and {faces}."
        )
    if d2 != 0 and not (1 <= d2 <= faces):
        raise ValueError(
            f"Second die value is {d2}, must be 0 (no second die) or between 1 and {faces}."
        )

    return (d1, d2)


def validate_tile_label(label: int, num_tiles: int = 9) -> int:
    """
    Validate a single tile label.

    Args:
        label: Tile label to validate
        num_tiles: Number of tiles in the box

    Returns:
        Validated label

    Raises:
        ValueError: If label is not an integer in 1..num_tiles
    """
    _require_int(label, "Tile label")

    if not (1 <= label <= num_tiles):
        raise ValueError(f"Tile label {label} is out of range. Must be between 1 and {num_tiles}.")

    return label


def validate_tile_flags(flags: Sequence[bool], num_tiles: int = 9) -> tuple[bool, ...]:
    """
    Validate a sequence of open/closed tile flags.

    Args:
        flags: One boolean per tile
        num_tiles: Required number of flags

    Returns:
        Validated flags as a tuple

    Raises:
        ValueError: If the length is wrong or a flag is not a boolean
    """
    flags_tuple = tuple(flags)

    if len(flags_tuple) != num_tiles:
        raise ValueError(f"Box must have exactly {num_tiles} tiles, got {len(flags_tuple)}.")

    for i, flag in enumerate(flags_tuple):
        if not isinstance(flag, bool):
            raise ValueError(f"Tile flag at index {i} must be a boolean, got {type(flag).__name__}.")

    return flags_tuple
