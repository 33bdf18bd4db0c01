from __future__ import annotations
import operator
import numpy as np
import pandas as pd
from collections.abc import Mapping
from .types import *


def to_int(value: Any) -> int:
    """coerce a size or count argument into an int"""
    if isinstance(value, bool):
        raise TypeError(f"no implicit conversion of {type(value).__name__} into Integer")
    if isinstance(value, (float, np.floating)):
        # truncates toward zero
        try:
            return int(value)
        except (ValueError, OverflowError):
            raise TypeError(f"float {value} out of range of integer") from None
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"no implicit conversion of {type(value).__name__} into Integer") from None


def to_sequence(value: Any) -> List[Any]:
    """coerce a zip argument into a finite list"""
    from .enumerable import Enumerable
    if isinstance(value, Enumerable):
        return value.to_a()
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, pd.DataFrame):
        return list(value.itertuples(index=False, name=None))
    if isinstance(value, pd.Series):
        return value.tolist()
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return list(value)
    raise TypeError(f"wrong argument type {type(value).__name__} (must respond to :to_a)")


def compare(a: Any, b: Any) -> int:
    """three-way comparison: -1, 0 or 1"""
    if a < b: return -1
    if a > b: return 1
    return 0
