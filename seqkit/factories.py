import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Seq

def from_iterable(data: Iterable[T]) -> 'Seq[T]':
    """create a seq from an iterable"""
    from .enumerable import Seq
    return Seq(lambda: list(data))

def from_range(start: int, count: int) -> 'Seq[int]':
    """create a seq of count consecutive ints"""
    from .enumerable import Seq
    return Seq(lambda: list(range(start, start + count)))

def empty() -> 'Seq[Any]':
    """create an empty seq"""
    from .enumerable import Seq
    return Seq(lambda: [])

# --- aliases ---
seq = from_iterable
S = from_iterable
