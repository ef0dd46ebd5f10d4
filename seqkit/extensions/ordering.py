from __future__ import annotations
import typing
import logging
import numpy as np
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Seq

logger = logging.getLogger(__name__)


def _try_numpy_argsort(keys: List[Any]) -> Optional[List[int]]:
    """
    try to order homogeneous int or float keys with numpy's introsort.
    returns the permutation as a list of indices, or None when the keys don't qualify.
    """
    if len(keys) < 2:
        return None
    # exact type checks: bools, numpy scalars and str subclasses take the python path
    if all(type(k) is int for k in keys):
        dtype = np.int64
    elif all(type(k) is float for k in keys):
        dtype = np.float64
    else:
        return None
    try:
        arr = np.asarray(keys, dtype=dtype)
    except (OverflowError, TypeError, ValueError):  # ints beyond int64
        logger.debug(f"numpy fast path abandoned for {len(keys)} keys")
        return None
    # 'quicksort' is numpy's introsort and is not stable
    return np.argsort(arr, kind='quicksort').tolist()


def sort(values: MutableSequence[T]) -> MutableSequence[T]:
    """
    sort values ascending by their natural order (numeric or lexicographic).
    mutates values in place and returns the same object. equal elements are
    indistinguishable, so stability does not apply.
    """
    order = _try_numpy_argsort(values)
    if order is not None:
        logger.debug(f"sorting {len(values)} values with numpy")
        values[:] = [values[i] for i in order]
    else:
        values[:] = sorted(values)
    return values


def sort_pred(values: MutableSequence[T], key_func: KeySelector[T, K]) -> MutableSequence[T]:
    """
    sort values ascending by key_func(item), in place, returning the same object.
    key_func is called once per element. elements with equal keys may end up in any
    relative order: the sort is not guaranteed to be stable.
    """
    keys = [key_func(item) for item in values]
    order = _try_numpy_argsort(keys)
    if order is None:
        order = sorted(range(len(keys)), key=keys.__getitem__)
    else:
        logger.debug(f"sorting {len(values)} keys with numpy")
    values[:] = [values[i] for i in order]
    return values


class OrderingAccessor(Generic[T]):
    """
    sorting over the wrapped sequence. unlike sort() and sort_pred(), these methods
    work on a copy and never mutate the data the sequence was built from.
    """
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def sort(self) -> 'Seq[T]':
        """ascending natural order"""
        from ..enumerable import Seq
        return Seq(lambda: sort(list(self._seq._get_data())))

    def sort_by(self, key_func: KeySelector[T, K]) -> 'Seq[T]':
        """ascending order of key_func(item)"""
        from ..enumerable import Seq
        return Seq(lambda: sort_pred(list(self._seq._get_data()), key_func))

    def is_sorted(self, key_func: Optional[KeySelector[T, K]] = None) -> bool:
        """true when the sequence is non-decreasing (by key, if given)"""
        data = self._seq._get_data()
        keys = data if key_func is None else [key_func(item) for item in data]
        return all(not keys[i + 1] < keys[i] for i in range(len(keys) - 1))
