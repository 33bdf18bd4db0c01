import typing
from collections.abc import Mapping
import pandas as pd
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable yielding one value per step; a one-shot iterator can only be traversed once"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ((item,) for item in data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ((i,) for i in range(start, start + count)))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ((item,) for _ in range(count)))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())

def generate(generator_func: Callable[[], T]) -> 'Enumerable[T]':
    """
    an unbounded sequence calling generator_func once per step.
    bound it with take/first/take_while or an early-stopping predicate.
    """
    from .enumerable import Enumerable
    def steps():
        while True:
            yield (generator_func(),)
    return Enumerable(steps)

def from_mapping(mapping: Mapping) -> 'Enumerable[Tuple[K, V]]':
    """create enumerable yielding (key, value) per step, so each element is a pair"""
    from .enumerable import Enumerable
    return Enumerable(lambda: mapping.items())

def from_series(series: pd.Series) -> 'Enumerable[Tuple[Any, Any]]':
    """create enumerable yielding (index label, value) per step of a pandas series"""
    from .enumerable import Enumerable
    return Enumerable(lambda: series.items())

# --- aliases ---
each = from_iterable
E = from_iterable
