from __future__ import annotations
from ..types import *


def map_update(m1: Optional[Dict[K, V]], m2: Optional[Mapping[K, V]]) -> Dict[K, V]:
    """
    merge m2 into m1, values from m2 winning on shared keys.
    m1 is modified and returned; a None m1 gives a new dict, a None m2 leaves m1 as is.
    """
    if m1 is None:
        m1 = {}
    if m2 is None:
        return m1
    m1.update(m2)
    return m1


def map_keys(m: Mapping[K, V]) -> List[K]:
    """all keys as a list, in the dict's iteration order"""
    return list(m.keys())


def map_values(m: Mapping[K, V]) -> List[V]:
    """all values as a list, in the dict's iteration order"""
    return list(m.values())


def map_get(m: Mapping[K, V], key: K, default: V) -> V:
    """value for key, or default when the key is missing"""
    return m.get(key, default)


def map_set_default(m: Dict[K, V], key: K, default: V) -> Tuple[V, bool]:
    """
    return (existing value, True) when key is present. otherwise store default under key
    and return (default, False).
    """
    if key in m:
        return m[key], True
    m[key] = default
    return default, False
