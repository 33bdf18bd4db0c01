from __future__ import annotations
import typing
from collections import Counter, defaultdict
from ..types import *
from ..shaping import shape

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _GroupingOperations(Generic[T]):
    def group_by(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None):
        """group elements by a key; keys keep the order they were first seen in"""
        if key_selector is None:
            return self._deferred('group_by')

        groups = defaultdict(list)
        def visit(*values):
            element = shape(values)
            key = key_selector(element)
            if key is STOP:
                return STOP
            groups[key].append(element)
        self._visit(visit)
        return dict(groups)

    def tally(self: 'Enumerable[T]') -> Dict[T, int]:
        """count occurrences of each distinct element, in first-occurrence order"""
        counts = Counter()
        def visit(*values):
            counts[shape(values)] += 1
        self._visit(visit)
        return dict(counts)

    def uniq(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None) -> List[T]:
        """drop duplicates (by element, or by key_selector's result), keeping first occurrences"""
        seen = {}
        def visit(*values):
            element = shape(values)
            key = element if key_selector is None else key_selector(element)
            if key is STOP:
                return STOP
            if key not in seen:
                seen[key] = element
        self._visit(visit)
        return list(seen.values())

    def to_h(self: 'Enumerable[T]', selector: Optional[Selector[T, Any]] = None) -> Dict[Any, Any]:
        """read each element (or selector's result) as a [key, value] pair; later keys overwrite"""
        result = {}
        def visit(*values):
            pair = shape(values)
            if selector is not None:
                pair = selector(pair)
                if pair is STOP:
                    return STOP
            if not isinstance(pair, (list, tuple)):
                raise TypeError(f"wrong element type {type(pair).__name__} (expected Array)")
            if len(pair) != 2:
                raise ValueError(f"element has wrong array length (expected 2, was {len(pair)})")
            result[pair[0]] = pair[1]
        self._visit(visit)
        return result

    def each_with_object(self: 'Enumerable[T]', memo: U, action: Optional[Callable[[T, U], Any]] = None):
        """call action(element, memo) for every element and return memo itself"""
        if action is None:
            return self._deferred('each_with_object', memo)

        self._visit(lambda *values: action(shape(values), memo))
        return memo

    def filter_map(self: 'Enumerable[T]', selector: Optional[Selector[T, U]] = None):
        """selector's results, without the None and False ones"""
        if selector is None:
            return self._deferred('filter_map')

        result = []
        def visit(*values):
            mapped = selector(shape(values))
            if mapped is STOP:
                return STOP
            if truthy(mapped):
                result.append(mapped)
        self._visit(visit)
        return result
