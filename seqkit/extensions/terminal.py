from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Seq

class TerminalAccessor(Generic[T]):
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._seq._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._seq._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._seq._get_data())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._seq._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._seq._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._seq._get_data())
        return sum(1 for x in self._seq._get_data() if predicate(x))

    def first_or_default(self, default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        data = self._seq._get_data()
        return data[0] if data else default
