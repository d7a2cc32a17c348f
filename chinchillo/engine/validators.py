"""
Chinchillo - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

from chinchillo.engine.base import DICE_PER_ROLL, DIE_FACES


def validate_dice_values(
    values: Sequence[int],
    count: int = DICE_PER_ROLL,
    faces: int = DIE_FACES
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        count: Exact number of dice required
        faces: Highest face value of a die

    Returns:
        Validated values as a tuple, sorted ascending

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)

    if len(values_tuple) != count:
        raise ValueError(f"Exactly {count} dice required, got {len(values_tuple)}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= faces):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {faces}."
            )

    return tuple(sorted(values_tuple))


def validate_roll_count(count: int, max_count: int | None = None) -> int:
    """
    Validate the number of rolls a side may take.

    Args:
        count: Roll cap requested by the caller
        max_count: Highest cap allowed (None = no limit)

    Returns:
        Validated count

    Raises:
        ValueError: If count is not an integer in range
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Roll count must be an integer, got {type(count).__name__}.")

    if count < 1:
        raise ValueError(f"Roll count must be at least 1, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"Roll count must be at most {max_count}, got {count}.")

    return count
