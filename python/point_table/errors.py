from __future__ import annotations

import math


class InvalidArgument(ValueError):
    """Raised when a required argument is missing or malformed."""


def require(value, name: str):
    """Check that argument is given.

    Args:
        value: Argument to be checked.
        name: Argument name to show in error message.

    Returns:
        Argument as it is.
    """
    if value is None:
        raise InvalidArgument(f"{name} is None")
    return value


def require_finite(value, name: str) -> float:
    """Convert argument to float and check that it is finite.

    Args:
        value: Number to be checked.
        name: Argument name to show in error message.

    Returns:
        Argument as float.
    """
    require(value, name)
    try:
        value = float(value)
    except (TypeError, ValueError) as err:
        raise InvalidArgument(f"{name} is not a number: {value!r}") from err
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} is not finite: {value}")
    return value
