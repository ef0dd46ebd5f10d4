from __future__ import annotations
import typing
import logging
import numpy as np
from itertools import batched, chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Seq

logger = logging.getLogger(__name__)


def chunk_slice(values: Iterable[T], chunk_size: int) -> List[List[T]]:
    """
    split a sequence into contiguous chunks of chunk_size; the last chunk holds the remainder.

    an empty sequence gives no chunks at all. chunks are new lists, so mutating a chunk
    never changes the source. chunk_size must be a positive integer: anything below 1
    raises InvalidArgumentError instead of partitioning forever.
    """
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, (int, np.integer)):
        raise TypeError(f"chunk_size must be an integer, got {type(chunk_size).__name__}")
    if chunk_size < 1:
        logger.debug(f"rejected chunk_size={chunk_size}")
        raise InvalidArgumentError(f"chunk_size must be at least 1, got {chunk_size}")

    # itertools.batched yields tuples; every chunk is materialized as its own list
    return [list(batch) for batch in batched(values, int(chunk_size))]


def concat_slices(*sequences: Iterable[T]) -> List[T]:
    """concatenate sequences in argument order into one new list. no arguments gives []."""
    return list(chain.from_iterable(sequences))


class PartitionAccessor(Generic[T]):
    """chunking and joining. both operations are lazy."""
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def chunk(self, size: int) -> 'Seq[List[T]]':
        """split into chunks of the given size"""
        from ..enumerable import Seq
        return Seq(lambda: chunk_slice(self._seq._get_data(), size))

    def concat(self, *others: Iterable[T]) -> 'Seq[T]':
        """append other sequences, preserving every element and its order"""
        from ..enumerable import Seq
        return Seq(lambda: concat_slices(self._seq._get_data(), *others))
