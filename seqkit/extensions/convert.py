from __future__ import annotations
import numpy as np
from ..types import *


def to_object_list(values: Iterable[T]) -> List[Any]:
    """copy any sequence into a plain list of objects"""
    return list(values)


def to_str_list(values: Iterable[str]) -> List[str]:
    """convert str-like elements (str subclasses included) to plain str"""
    return [str(item) for item in values]


def to_str_derived_list(values: Iterable[str], str_type: Callable[[str], U]) -> List[U]:
    """convert str elements to a str-derived type, e.g. a str subclass or enum-like wrapper"""
    return [str_type(item) for item in values]


def to_number_list(values: Iterable[Number], number_type: Union[Type, np.dtype]) -> List[Number]:
    """
    convert numbers to another numeric type.

    python int and float use the builtin constructors, so int() truncates floats toward zero.
    numpy scalar types (np.int32, np.uint8, np.float32, ...) use numpy casting and so
    reproduce fixed-width behaviour: out-of-range integers wrap around, e.g.
    to_number_list([300, -1], np.uint8) == [44, 255]. results are always python scalars.
    """
    if number_type in (int, float):
        return [number_type(item) for item in values]

    dtype = np.dtype(number_type)
    if dtype.kind not in 'iuf':
        raise TypeError(f"number_type must be an integer or float type, got {dtype}")
    data = list(values)
    if not data:
        return []
    source = np.asarray(data)
    if source.dtype.kind not in 'iufb':
        raise TypeError(f"cannot convert values of dtype {source.dtype} to {dtype}")
    return source.astype(dtype).tolist()
