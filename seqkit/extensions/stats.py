from __future__ import annotations
import numpy as np
from ..types import *


def min_of(*values: Ordered) -> Tuple[Optional[Ordered], Optional[InputRequiredError]]:
    """
    find the minimum of the given values.
    returns (minimum, None), or (None, InputRequiredError) when called with no values.
    """
    if not values:
        return None, InputRequiredError("min_of requires at least one value")
    smallest = values[0]
    for value in values[1:]:
        if value < smallest:
            smallest = value
    return smallest, None


def max_of(*values: Ordered) -> Tuple[Optional[Ordered], Optional[InputRequiredError]]:
    """
    find the maximum of the given values.
    returns (maximum, None), or (None, InputRequiredError) when called with no values.
    """
    if not values:
        return None, InputRequiredError("max_of requires at least one value")
    largest = values[0]
    for value in values[1:]:
        if value > largest:
            largest = value
    return largest, None


def abs_int64(x: Int) -> int:
    """
    absolute value of a signed 64-bit integer.
    raises OverflowError for the lowest int64, which has no positive counterpart.
    """
    value = int(x)
    if not INT64_MIN <= value <= INT64_MAX:
        raise OverflowError(f"{value} is outside the int64 range")
    if value == INT64_MIN:
        raise OverflowError("unable to calculate abs of the lowest int64 value")
    return int(np.abs(np.int64(value)))
