from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Visitor = Callable[..., Any]
Predicate = Callable[[T], Any]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]


class _Signal:
    """a named singleton used as a control value, never as data"""

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False


# returned by a visitor to ask the sequence to stop producing elements
STOP = _Signal('STOP')

# marks an optional positional argument that was not passed at all (distinct from None)
NONE = _Signal('NONE')


def truthy(value: Any) -> bool:
    """only None, False and the control signals count as false; 0, '' and [] are true"""
    return value is not None and value is not False and not isinstance(value, _Signal)
