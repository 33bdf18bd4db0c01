from __future__ import annotations
import typing
from ..types import *
from ..shaping import shape
from ..coercion import compare

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _OrderingOperations(Generic[T]):
    def sort_by(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None):
        """stable sort by a derived key; equal keys keep their original order"""
        if key_selector is None:
            return self._deferred('sort_by')

        originals = []
        keyed = []
        def visit(*values):
            element = shape(values)
            key = key_selector(element)
            if key is STOP:
                return STOP
            # the position breaks ties, so keys are the only thing ever compared for order
            keyed.append((key, len(originals)))
            originals.append(element)
        self._visit(visit)
        if len(keyed) > 1:
            keyed.sort()
        return [originals[position] for _, position in keyed]

    def max_by(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None):
        """the element with the largest key; the first one wins ties"""
        if key_selector is None:
            return self._deferred('max_by')
        return self._extreme_by(key_selector, lambda candidate, best: candidate > best)

    def min_by(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None):
        """the element with the smallest key; the first one wins ties"""
        if key_selector is None:
            return self._deferred('min_by')
        return self._extreme_by(key_selector, lambda candidate, best: candidate < best)

    def _extreme_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                    improves: Callable[[K, K], bool]) -> Optional[T]:
        best = None
        best_key = None
        first = True
        def visit(*values):
            nonlocal best, best_key, first
            element = shape(values)
            key = key_selector(element)
            if key is STOP:
                return STOP
            if first or improves(key, best_key):
                best, best_key, first = element, key, False
        self._visit(visit)
        return best

    def minmax(self: 'Enumerable[T]', comparer: Optional[Comparer[T]] = None) -> List[Optional[T]]:
        """
        [min, max] in a single pass, using comparer(a, b) -> int when given and
        the elements' own ordering otherwise. [None, None] for an empty sequence.
        """
        cmp = comparer if comparer is not None else compare
        low = high = None
        first = True
        def visit(*values):
            nonlocal low, high, first
            element = shape(values)
            if first:
                low = high = element
                first = False
                return
            order = cmp(element, high)
            if order is STOP:
                return STOP
            if order > 0:
                high = element
            order = cmp(element, low)
            if order is STOP:
                return STOP
            if order < 0:
                low = element
        self._visit(visit)
        return [low, high]

    def minmax_by(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None):
        """
        [element with smallest key, element with largest key].
        after the first element the key is computed twice per element, once per
        comparison, so key_selector sees every later element two times.
        """
        if key_selector is None:
            return self._deferred('minmax_by')

        low = high = None
        low_key = high_key = None
        first = True
        def visit(*values):
            nonlocal low, high, low_key, high_key, first
            element = shape(values)
            if first:
                low = high = element
                low_key = high_key = key_selector(element)
                if low_key is STOP:
                    return STOP
                first = False
                return
            key = key_selector(element)
            if key is STOP:
                return STOP
            if key > high_key:
                high, high_key = element, key
            key = key_selector(element)
            if key is STOP:
                return STOP
            if key < low_key:
                low, low_key = element, key
        self._visit(visit)
        return [low, high]
