from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *

# --- algorithm groups ---
from .extensions.core import _CoreOperations
from .extensions.windowing import _WindowingOperations
from .extensions.predicates import _PredicateOperations
from .extensions.grouping import _GroupingOperations
from .extensions.ordering import _OrderingOperations
from .extensions.transform import _TransformOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _visit(self, visitor: Visitor) -> None:
        """
        call visitor(*values) once per element, in order.
        must stop producing elements as soon as the visitor returns STOP.
        """
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def each(self, visitor: Optional[Visitor] = None):
        """visit every element, or return a deferred enumerator when no visitor is given"""
        if visitor is None:
            return self._deferred('each')
        self._visit(visitor)
        return self

    def _deferred(self, method: str, *args: Any) -> 'DeferredEnumerator':
        """bind (method, args) to this sequence for later realization"""
        from .deferred import DeferredEnumerator
        return DeferredEnumerator(self, method, args)

    def __iter__(self) -> Iterator[T]:
        # materializes first; bound an unbounded sequence with take/first before iterating it
        return iter(self.to_a())

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T],
    _WindowingOperations[T],
    _PredicateOperations[T],
    _GroupingOperations[T],
    _OrderingOperations[T],
    _TransformOperations[T]
):
    """a ruby-style enumerable: every algorithm is built on the single each() primitive."""
    def __init__(self, steps_func: Optional[Callable[[], Iterable[Tuple[Any, ...]]]] = None):
        """init with a function returning a fresh iterable of value tuples per traversal"""
        self._steps_func = steps_func
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def _visit(self, visitor: Visitor) -> None:
        for count, values in enumerate(self._steps_func(), 1):
            if visitor(*values) is STOP:
                logger.debug("%s: traversal stopped early after %d step(s)", type(self).__name__, count)
                return

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
