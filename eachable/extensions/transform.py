from __future__ import annotations
import typing
from collections.abc import Mapping
from ..types import *
from ..shaping import shape
from ..coercion import to_int, to_sequence

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _TransformOperations(Generic[T]):
    def flat_map(self: 'Enumerable[T]', selector: Optional[Selector[T, Any]] = None):
        """
        concatenate selector's results. a result that can be iterated contributes
        its elements; strings and scalars are appended as they are.
        """
        from ..enumerable import Enumerable
        if selector is None:
            return self._deferred('flat_map')

        result = []
        def visit(*values):
            mapped = selector(shape(values))
            if mapped is STOP:
                return STOP
            if isinstance(mapped, Enumerable):
                mapped._visit(lambda *inner: result.append(shape(inner)))
            elif isinstance(mapped, Mapping):
                result.extend(mapped.items())
            elif isinstance(mapped, Iterable) and not isinstance(mapped, (str, bytes)):
                result.extend(mapped)
            else:
                result.append(mapped)
        self._visit(visit)
        return result

    collect_concat = flat_map

    def zip(self: 'Enumerable[T]', *others: Any, action: Optional[Callable[[List[Any]], Any]] = None):
        """
        one list per element of this sequence: [element, others[0][i], others[1][i], ...].
        this sequence decides the length; shorter others are padded with None.
        with an action each list is passed to it and None is returned.
        """
        columns = [to_sequence(other) for other in others]
        result = None if action is not None else []
        index = 0
        def visit(*values):
            nonlocal index
            row = [shape(values)]
            row.extend(column[index] if index < len(column) else None for column in columns)
            index += 1
            if result is None:
                return action(row)
            result.append(row)
        self._visit(visit)
        return result

    def cycle(self: 'Enumerable[T]', n: Optional[int] = None, action: Optional[Callable[[T], Any]] = None):
        """
        call action for every element n times over, or forever when n is None.
        the source is traversed once and buffered, so its side effects happen once.
        the only ways out of an endless cycle are the action raising or returning STOP.
        """
        if action is None:
            return self._deferred('cycle', n)

        if n is None:
            remaining = -1
        else:
            remaining = to_int(n)
            if remaining <= 0:
                return None

        buffer = []
        stopped = False
        def visit(*values):
            nonlocal stopped
            element = shape(values)
            buffer.append(element)
            if action(element) is STOP:
                stopped = True
                return STOP
        self._visit(visit)
        if stopped or not buffer:
            return None

        while remaining < 0 or remaining > 1:
            if remaining > 0:
                remaining -= 1
            for element in buffer:
                if action(element) is STOP:
                    return None
        return None

    def reverse_each(self: 'Enumerable[T]', action: Optional[Callable[[T], Any]] = None):
        """buffer the whole sequence, then call action from the last element to the first"""
        if action is None:
            return self._deferred('reverse_each')

        buffer = self.to_a()
        for element in reversed(buffer):
            if action(element) is STOP:
                break
        return self
