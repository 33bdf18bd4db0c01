from __future__ import annotations

import logging
from .types import *
from .enumerable import Enumerable

logger = logging.getLogger(__name__)


class DeferredEnumerator(Enumerable[T]):
    """
    a not-yet-executed call: (source, method name, arguments).
    realize(block) runs source.<method>(*args, block), so realizing it gives the
    same result as calling the method with that block directly. it can be
    realized any number of times, and since it is itself an Enumerable, every
    algorithm works on it: each element it yields is whatever the bound method
    passes to its block.
    """

    # these hand every source element to their block exactly once, in order, and
    # compare the answers as keys. enumerating them is enumerating the source.
    _KEYED = frozenset(("sort_by", "max_by", "min_by", "minmax_by"))

    def __init__(self, source: Enumerable, method: str, args: Tuple[Any, ...] = ()):
        super().__init__()
        self.source = source
        self.method = method
        self.args = tuple(args)
        logger.debug("deferred %s%r on %r", method, self.args, source)

    def realize(self, block: Visitor) -> Any:
        logger.debug("realizing %s%r", self.method, self.args)
        return getattr(self.source, self.method)(*self.args, block)

    def each(self, visitor: Optional[Visitor] = None) -> Any:
        """with a visitor this is realize(); without one it is the enumerator itself"""
        if visitor is None:
            return self
        return self.realize(visitor)

    def _visit(self, visitor: Visitor) -> None:
        if self.method in self._KEYED:
            self.source._visit(visitor)
            return
        self.realize(visitor)

    def __eq__(self, other) -> bool:
        return (isinstance(other, DeferredEnumerator)
                and self.source is other.source
                and self.method == other.method
                and self.args == other.args)

    def __hash__(self) -> int:
        return hash((id(self.source), self.method))

    def __repr__(self) -> str:
        args = ', '.join(map(repr, self.args))
        return f"<DeferredEnumerator: {self.source!r}:{self.method}({args})>"
