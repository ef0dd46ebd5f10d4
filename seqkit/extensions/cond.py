from __future__ import annotations
from ..types import *


def if_(cond: Any, a: T, b: T) -> T:
    """return a when cond is truthy, otherwise b. both are evaluated by the caller."""
    return a if cond else b


def must(value: T, error: Optional[BaseException] = None) -> T:
    """
    unwrap a (value, error) pair: return value, or raise error when there is one.
    example: must(*min_of(3, 1, 2)) -> 1, must(*min_of()) raises InputRequiredError.
    """
    if error is not None:
        raise error
    return value
