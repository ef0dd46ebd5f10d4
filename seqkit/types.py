from typing import (
    TypeVar, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Generic, Sequence, MutableSequence, Mapping
)

import numpy as np

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]

# --- scalar kinds accepted where a number or an ordered value is required ---

Int = Union[int, np.signedinteger]
UInt = Union[int, np.unsignedinteger]
Float = Union[float, np.floating]
Number = Union[Int, UInt, Float]
Ordered = Union[Number, str]

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


# --- errors ---

class SeqkitError(Exception):
    """base class for errors raised by seqkit"""
    pass


class InvalidArgumentError(SeqkitError, ValueError):
    """an argument is outside the range an operation accepts"""
    pass


class InputRequiredError(SeqkitError, ValueError):
    """an operation needs at least one input value"""

    def __init__(self, message: str = "at least one input value is required"):
        super().__init__(message)
