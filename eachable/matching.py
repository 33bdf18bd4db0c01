from __future__ import annotations
import re
from .types import *


def matches(pattern: Any, element: Any) -> bool:
    """
    case-equality test used by all/any/none/one/grep when a pattern is given.
    classes match instances, regexes search strings, ranges test membership,
    other callables are called, and anything else compares by equality.
    """
    if isinstance(pattern, type) or (
            isinstance(pattern, tuple) and pattern and all(isinstance(p, type) for p in pattern)):
        return isinstance(element, pattern)
    if isinstance(pattern, re.Pattern):
        return isinstance(element, str) and pattern.search(element) is not None
    if isinstance(pattern, range):
        return element in pattern
    if callable(pattern):
        return truthy(pattern(element))
    return pattern == element
