from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Seq


def contains(values: Iterable[T], value: T) -> bool:
    """test whether some element equals value. stops at the first match."""
    # explicit == rather than 'in', so this always agrees with index_of
    return any(item == value for item in values)


def contains_pred(values: Iterable[T], predicate: Predicate[T]) -> bool:
    """test whether predicate holds for some element. stops at the first true result."""
    return any(predicate(item) for item in values)


def find_pred(values: Iterable[T], predicate: Predicate[T],
              default: Optional[T] = None) -> Tuple[Optional[T], bool]:
    """
    find the first element satisfying predicate.
    returns (element, True) on a match and (default, False) otherwise.
    """
    for item in values:
        if predicate(item):
            return item, True
    return default, False


def index_of(values: Sequence[T], value: T) -> int:
    """index of the first element equal to value, or -1."""
    for i, item in enumerate(values):
        if item == value:
            return i
    return -1


def last_index_of(values: Sequence[T], value: T) -> int:
    """index of the last element equal to value, or -1. scans from the end."""
    for i in range(len(values) - 1, -1, -1):
        if values[i] == value:
            return i
    return -1


def index_of_slice(values: Sequence[T], sub: Sequence[T]) -> int:
    """
    index where sub first appears contiguously inside values, or -1.
    an empty sub, or one longer than values, is never found.
    brute force o(n*m): candidate starts are filtered on sub's first element,
    so the leftmost match is always the one returned.
    """
    length, sub_length = len(values), len(sub)
    if sub_length == 0 or length < sub_length:
        return -1

    first = sub[0]
    for i in range(length - sub_length + 1):
        if values[i] != first:
            continue
        if all(values[i + j] == sub[j] for j in range(1, sub_length)):
            return i
    return -1


class SearchAccessor(Generic[T]):
    """membership and position queries. all methods are terminal."""
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def contains(self, value: T) -> bool:
        return contains(self._seq._get_data(), value)

    def contains_pred(self, predicate: Predicate[T]) -> bool:
        return contains_pred(self._seq._get_data(), predicate)

    def find(self, predicate: Predicate[T], default: Optional[T] = None) -> Tuple[Optional[T], bool]:
        """first element matching predicate, paired with a found flag"""
        return find_pred(self._seq._get_data(), predicate, default)

    def index_of(self, value: T) -> int:
        return index_of(self._seq._get_data(), value)

    def last_index_of(self, value: T) -> int:
        return last_index_of(self._seq._get_data(), value)

    def index_of_slice(self, sub: Iterable[T]) -> int:
        """position of a contiguous sub-sequence, or -1"""
        return index_of_slice(self._seq._get_data(), list(sub))
