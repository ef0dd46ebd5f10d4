from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.search import SearchAccessor
from .extensions.partition import PartitionAccessor
from .extensions.ordering import OrderingAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class ISeq(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base implementation ---

class _BaseSeq(ISeq[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        return f"Seq({self._get_data()!r})"

# --- main class ---

class Seq(_BaseSeq[T]):
    """a lazy, chainable wrapper around the seqkit toolkit functions."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.search = SearchAccessor(self)
        self.part = PartitionAccessor(self)
        self.order = OrderingAccessor(self)
        self.to = TerminalAccessor(self)

    def where(self, predicate: Predicate[T]) -> 'Seq[T]':
        """filter elements based on a predicate"""
        return Seq(lambda: [x for x in self._get_data() if predicate(x)])

    def select(self, selector: Selector[T, U]) -> 'Seq[U]':
        """project each element to a new form"""
        return Seq(lambda: [selector(x) for x in self._get_data()])
