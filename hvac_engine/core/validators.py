"""
Argument guards shared by flows, process equations and blocks.

Each guard raises the engine's own error types so callers can tell a missing
input (MissingArgumentError) from a value outside its validity range
(OutOfBoundsError).
"""

import math
from typing import Any, Optional

from hvac_engine.core.exceptions import MissingArgumentError, OutOfBoundsError


def require_not_none(value: Any, name: str) -> Any:
    """Return value unchanged, or raise MissingArgumentError when it is None."""
    if value is None:
        raise MissingArgumentError(f"Required argument '{name}' is missing")
    return value


def require_finite(value: float, name: str) -> float:
    require_not_none(value, name)
    if not math.isfinite(value):
        raise OutOfBoundsError(f"'{name}' must be a finite number, got {value}")
    return value


def require_in_range(
    value: float,
    lower: Optional[float],
    upper: Optional[float],
    name: str
) -> float:
    """
    Check that lower <= value <= upper.

    Args:
        value: Quantity to check.
        lower: Inclusive lower bound, or None for unbounded.
        upper: Inclusive upper bound, or None for unbounded.
        name: Quantity name used in the error message.

    Returns:
        The validated value.

    Raises:
        MissingArgumentError: If value is None.
        OutOfBoundsError: If value is non-finite or outside the range.
    """
    require_finite(value, name)
    if lower is not None and value < lower:
        raise OutOfBoundsError(f"'{name}' = {value} is below the minimum limit of {lower}")
    if upper is not None and value > upper:
        raise OutOfBoundsError(f"'{name}' = {value} is above the maximum limit of {upper}")
    return value


def require_non_negative(value: float, name: str) -> float:
    return require_in_range(value, 0.0, None, name)


def require_positive(value: float, name: str) -> float:
    require_finite(value, name)
    if value <= 0.0:
        raise OutOfBoundsError(f"'{name}' must be greater than zero, got {value}")
    return value
