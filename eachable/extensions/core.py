from __future__ import annotations
import typing
from functools import cmp_to_key
from ..types import *
from ..shaping import shape
from ..matching import matches
from ..coercion import compare

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _CoreOperations(Generic[T]):
    def to_a(self: 'Enumerable[T]') -> List[T]:
        """materialize the sequence into a list"""
        result = []
        self._visit(lambda *values: result.append(shape(values)))
        return result

    entries = to_a

    def each_with_index(self: 'Enumerable[T]', action: Optional[Callable[[T, int], Any]] = None):
        """call action(element, index) for every element"""
        if action is None:
            return self._deferred('each_with_index')

        index = 0
        def visit(*values):
            nonlocal index
            position = index
            index += 1
            return action(shape(values), position)
        self._visit(visit)
        return self

    def map(self: 'Enumerable[T]', selector: Optional[Selector[T, U]] = None):
        """project each element to a new form"""
        if selector is None:
            return self._deferred('map')

        result = []
        def visit(*values):
            mapped = selector(shape(values))
            if mapped is STOP:
                return STOP
            result.append(mapped)
        self._visit(visit)
        return result

    collect = map

    def select(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None):
        """elements for which the predicate is truthy"""
        if predicate is None:
            return self._deferred('select')

        result = []
        def visit(*values):
            element = shape(values)
            verdict = predicate(element)
            if verdict is STOP:
                return STOP
            if truthy(verdict):
                result.append(element)
        self._visit(visit)
        return result

    filter = select
    find_all = select

    def reject(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None):
        """elements for which the predicate is falsy"""
        if predicate is None:
            return self._deferred('reject')

        result = []
        def visit(*values):
            element = shape(values)
            verdict = predicate(element)
            if verdict is STOP:
                return STOP
            if not truthy(verdict):
                result.append(element)
        self._visit(visit)
        return result

    def find(self: 'Enumerable[T]', if_none: Optional[Callable[[], Any]] = None,
             predicate: Optional[Predicate[T]] = None):
        """the first element passing the predicate; if_none() (or None) when nothing does"""
        if predicate is None:
            return self._deferred('find', if_none)

        found = []
        def visit(*values):
            element = shape(values)
            verdict = predicate(element)
            if verdict is STOP:
                return STOP
            if truthy(verdict):
                found.append(element)
                return STOP
        self._visit(visit)
        if found:
            return found[0]
        return if_none() if if_none is not None else None

    detect = find

    def include(self: 'Enumerable[T]', item: Any) -> bool:
        """true if some element equals item; stops at the first match"""
        outcome = False
        def visit(*values):
            nonlocal outcome
            if shape(values) == item:
                outcome = True
                return STOP
        self._visit(visit)
        return outcome

    member = include

    def reduce(self: 'Enumerable[T]', *args: Any) -> Any:
        """
        reduce(func) folds from the first element, reduce(initial, func) from initial.
        an empty sequence without an initial value reduces to None.
        """
        if len(args) == 1:
            func, acc, has_acc = args[0], None, False
        elif len(args) == 2:
            acc, func = args
            has_acc = True
        else:
            raise TypeError(f"wrong number of arguments (given {len(args)}, expected 1..2)")

        def visit(*values):
            nonlocal acc, has_acc
            element = shape(values)
            if has_acc:
                folded = func(acc, element)
                if folded is STOP:
                    return STOP
                acc = folded
            else:
                acc, has_acc = element, True
        self._visit(visit)
        return acc

    inject = reduce

    def sum(self: 'Enumerable[T]', initial: Any = 0) -> Any:
        """add the elements to initial"""
        return self.reduce(initial, lambda acc, element: acc + element)

    def min(self: 'Enumerable[T]', comparer: Optional[Comparer[T]] = None) -> Optional[T]:
        """smallest element, by comparer(a, b) -> int or the natural ordering"""
        return self.minmax(comparer)[0]

    def max(self: 'Enumerable[T]', comparer: Optional[Comparer[T]] = None) -> Optional[T]:
        """largest element, by comparer(a, b) -> int or the natural ordering"""
        return self.minmax(comparer)[1]

    def sort(self: 'Enumerable[T]', comparer: Optional[Comparer[T]] = None) -> List[T]:
        """stable sort, by comparer(a, b) -> int or the natural ordering"""
        return sorted(self.to_a(), key=cmp_to_key(comparer if comparer is not None else compare))

    def partition(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None):
        """[elements passing the predicate, elements failing it]"""
        if predicate is None:
            return self._deferred('partition')

        passed, failed = [], []
        def visit(*values):
            element = shape(values)
            verdict = predicate(element)
            if verdict is STOP:
                return STOP
            (passed if truthy(verdict) else failed).append(element)
        self._visit(visit)
        return [passed, failed]

    def grep(self: 'Enumerable[T]', pattern: Any, selector: Optional[Selector[T, U]] = None) -> List[Any]:
        """elements matching pattern (see matches()), optionally projected by selector"""
        result = []
        def visit(*values):
            element = shape(values)
            if not matches(pattern, element):
                return
            mapped = selector(element) if selector is not None else element
            if mapped is STOP:
                return STOP
            result.append(mapped)
        self._visit(visit)
        return result
