from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Seq


def to_set(values: Iterable[T]) -> List[T]:
    """return the distinct elements of a sequence in order of first appearance."""
    # python 3.7+ dicts are ordered, so dict.fromkeys is an order-preserving unique filter
    return list(dict.fromkeys(values))


def to_set_pred(values: Iterable[T], key_func: KeySelector[T, K]) -> List[T]:
    """
    return the elements of a sequence that are distinct under key_func.
    the first element seen for a key wins, later elements with an equal key are dropped
    even when they differ otherwise. key_func is called once per element, in order.
    """
    seen = set()
    # 'and not seen.add(key)' records the key inside the comprehension
    return [item for item in values if (key := key_func(item)) not in seen and not seen.add(key)]


class SetAccessor(Generic[T]):
    """deduplication over the wrapped sequence."""
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def distinct(self, key_func: Optional[KeySelector[T, K]] = None) -> 'Seq[T]':
        """return distinct elements, optionally by key. preserves order of first appearance."""
        from ..enumerable import Seq
        def distinct_data():
            data = self._seq._get_data()
            if key_func is None:
                return to_set(data)
            return to_set_pred(data, key_func)
        return Seq(distinct_data)

    def is_distinct(self, key_func: Optional[KeySelector[T, K]] = None) -> bool:
        """true when the sequence holds no duplicates (by key, if given)."""
        data = self._seq._get_data()
        distinct = to_set(data) if key_func is None else to_set_pred(data, key_func)
        return len(distinct) == len(data)
