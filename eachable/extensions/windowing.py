from __future__ import annotations
import typing
from collections import deque
from ..types import *
from ..shaping import shape
from ..coercion import to_int

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _WindowingOperations(Generic[T]):
    def drop(self: 'Enumerable[T]', n: int) -> List[T]:
        """skip the first n elements and return the rest"""
        n = to_int(n)
        if n < 0:
            raise ValueError("attempt to drop negative size")

        result = []
        remaining = n
        def visit(*values):
            nonlocal remaining
            if remaining == 0:
                result.append(shape(values))
            else:
                remaining -= 1
        self._visit(visit)
        return result

    def take(self: 'Enumerable[T]', n: int) -> List[T]:
        """return the first n elements, stopping the traversal once they are collected"""
        n = to_int(n)
        if n < 0:
            raise ValueError("attempt to take negative size")
        return self._take_first(n)

    def _take_first(self: 'Enumerable[T]', n: int) -> List[T]:
        result = []
        # never touches the source for a zero count
        if n == 0:
            return result
        def visit(*values):
            result.append(shape(values))
            if len(result) == n:
                return STOP
        self._visit(visit)
        return result

    def first(self: 'Enumerable[T]', *args: int) -> Union[Optional[T], List[T]]:
        """
        first() returns the first element or None when the sequence is empty.
        first(n) returns a list of up to n elements, like take(n).
        """
        if len(args) == 0:
            found = []
            def visit(*values):
                found.append(shape(values))
                return STOP
            self._visit(visit)
            return found[0] if found else None
        if len(args) == 1:
            n = to_int(args[0])
            if n < 0:
                raise ValueError("attempt to take negative size")
            return self._take_first(n)
        raise TypeError(f"wrong number of arguments (given {len(args)}, expected 0..1)")

    def drop_while(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None):
        """drop elements up to, but not including, the first one the predicate rejects"""
        if predicate is None:
            return self._deferred('drop_while')

        result = []
        dropping = True
        def visit(*values):
            nonlocal dropping
            element = shape(values)
            # once flipped the predicate is never called again
            if dropping:
                verdict = predicate(element)
                if verdict is STOP:
                    return STOP
                dropping = truthy(verdict)
            if not dropping:
                result.append(element)
        self._visit(visit)
        return result

    def take_while(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None):
        """collect elements until the predicate first fails, then stop"""
        if predicate is None:
            return self._deferred('take_while')

        result = []
        def visit(*values):
            element = shape(values)
            verdict = predicate(element)
            if verdict is STOP or not truthy(verdict):
                return STOP
            result.append(element)
        self._visit(visit)
        return result

    def each_cons(self: 'Enumerable[T]', n: int, action: Optional[Callable[[List[T]], Any]] = None):
        """call action with every run of n consecutive elements (a sliding window)"""
        n = to_int(n)
        if n <= 0:
            raise ValueError("invalid size")
        if action is None:
            return self._deferred('each_cons', n)

        window = deque(maxlen=n)
        def visit(*values):
            window.append(shape(values))
            if len(window) == n:
                # the action gets its own copy, the window keeps sliding
                return action(list(window))
        self._visit(visit)
        return None

    def each_slice(self: 'Enumerable[T]', n: int, action: Optional[Callable[[List[T]], Any]] = None):
        """call action with consecutive chunks of n elements; the last chunk may be shorter"""
        n = to_int(n)
        if n <= 0:
            raise ValueError("invalid slice size")
        if action is None:
            return self._deferred('each_slice', n)

        chunk = []
        stopped = False
        def visit(*values):
            nonlocal chunk, stopped
            chunk.append(shape(values))
            if len(chunk) == n:
                full, chunk = chunk, []
                if action(full) is STOP:
                    stopped = True
                    return STOP
        self._visit(visit)
        if chunk and not stopped:
            action(chunk)
        return None
