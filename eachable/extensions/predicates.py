from __future__ import annotations
import typing
from ..types import *
from ..shaping import shape
from ..matching import matches

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _condition(pattern: Any, predicate: Optional[Predicate]) -> Callable[[Any], Any]:
    """
    a pattern wins over a predicate; with neither, the element itself is tested.
    the raw outcome is returned so a predicate can still answer STOP.
    """
    if pattern is not NONE:
        return lambda element: bool(matches(pattern, element))
    if predicate is not None:
        return predicate
    return lambda element: element


class _PredicateOperations(Generic[T]):
    def count(self: 'Enumerable[T]', item: Any = NONE, predicate: Optional[Predicate[T]] = None) -> int:
        """
        count() counts every element, count(item) counts elements equal to item,
        count(predicate=fn) counts elements for which fn is truthy.
        """
        total = 0
        if predicate is not None:
            def visit(*values):
                nonlocal total
                verdict = predicate(shape(values))
                if verdict is STOP:
                    return STOP
                if truthy(verdict):
                    total += 1
        elif item is NONE:
            def visit(*values):
                nonlocal total
                total += 1
        else:
            def visit(*values):
                nonlocal total
                if shape(values) == item:
                    total += 1
        self._visit(visit)
        return total

    def all(self: 'Enumerable[T]', pattern: Any = NONE, predicate: Optional[Predicate[T]] = None) -> bool:
        """true unless some element fails; stops at the first failure"""
        test = _condition(pattern, predicate)
        outcome = True
        def visit(*values):
            nonlocal outcome
            verdict = test(shape(values))
            if verdict is STOP:
                return STOP
            if not truthy(verdict):
                outcome = False
                return STOP
        self._visit(visit)
        return outcome

    def any(self: 'Enumerable[T]', pattern: Any = NONE, predicate: Optional[Predicate[T]] = None) -> bool:
        """true if some element passes; stops at the first pass"""
        test = _condition(pattern, predicate)
        outcome = False
        def visit(*values):
            nonlocal outcome
            verdict = test(shape(values))
            if verdict is STOP:
                return STOP
            if truthy(verdict):
                outcome = True
                return STOP
        self._visit(visit)
        return outcome

    def none(self: 'Enumerable[T]', pattern: Any = NONE, predicate: Optional[Predicate[T]] = None) -> bool:
        """true if no element passes; stops at the first pass"""
        return not self.any(pattern, predicate)

    def one(self: 'Enumerable[T]', pattern: Any = NONE, predicate: Optional[Predicate[T]] = None) -> bool:
        """true if exactly one element passes; stops as soon as a second one does"""
        test = _condition(pattern, predicate)
        hits = 0
        def visit(*values):
            nonlocal hits
            verdict = test(shape(values))
            if verdict is STOP:
                return STOP
            if truthy(verdict):
                hits += 1
                if hits > 1:
                    return STOP
        self._visit(visit)
        return hits == 1

    def find_index(self: 'Enumerable[T]', value: Any = NONE, predicate: Optional[Predicate[T]] = None):
        """position of the first element equal to value (or passing predicate), else None"""
        if predicate is None and value is NONE:
            return self._deferred('find_index', value)

        test = predicate if predicate is not None else (lambda element: bool(element == value))

        index = 0
        found = None
        def visit(*values):
            nonlocal index, found
            verdict = test(shape(values))
            if verdict is STOP:
                return STOP
            if truthy(verdict):
                found = index
                return STOP
            index += 1
        self._visit(visit)
        return found
