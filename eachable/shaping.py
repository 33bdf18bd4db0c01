"""
turns the positional values produced by one iteration step into one element.

a sequence may hand a visitor a single value (a list item) or several values
(a key and a value of a mapping, an element and its index). every algorithm
collapses them with `shape`, which tags the step as a `Single` or a `Multi`
and reads the element off the tag, so none of them has to care about arity.
"""
from .types import *


def shape(values: Tuple[Any, ...]) -> Any:
    """no values -> None, one value -> that value, several -> a tuple of them"""
    return Step.of(*values).element


class Step:
    """one iteration step, either a single value or a multi-value tuple"""
    __slots__ = ('values',)

    def __init__(self, values: Tuple[Any, ...]):
        self.values = values

    @staticmethod
    def of(*values: Any) -> 'Step':
        return Single(values) if len(values) <= 1 else Multi(values)

    @property
    def element(self) -> Any:
        raise NotImplementedError

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.values == other.values

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.values))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self.values))})"


class Single(Step):
    """a step that produced zero or one value"""
    __slots__ = ()

    @property
    def element(self) -> Any:
        return self.values[0] if self.values else None

    @property
    def is_multi(self) -> bool: return False


class Multi(Step):
    """a step that produced two or more values"""
    __slots__ = ()

    @property
    def element(self) -> Tuple[Any, ...]:
        return tuple(self.values)

    @property
    def is_multi(self) -> bool: return True
