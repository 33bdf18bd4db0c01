from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable.to_a()

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable.to_a())

    def dict(self, selector: Optional[Selector[T, Any]] = None) -> Dict[Any, Any]:
        """convert [key, value] pairs to a dictionary, see Enumerable.to_h"""
        return self._enumerable.to_h(selector)

    def array(self, dtype: Any = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable.to_a(), dtype=dtype)

    def series(self, index: Optional[Iterable[Any]] = None, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable.to_a(), index=index, name=name)

    def df(self, columns: Optional[List[str]] = None) -> pd.DataFrame:
        """convert to pandas dataframe; tuples and lists become rows, dicts become records"""
        return pd.DataFrame(self._enumerable.to_a(), columns=columns)
