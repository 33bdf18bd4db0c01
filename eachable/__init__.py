"""
'                      __          __    __
'    ___  ____ ______ / /_  ____ _/ /_  / /__
'   / _ \/ __ `/ ___// __ \/ __ `/ __ \/ / _ \
'  /  __/ /_/ / /__ / / / / /_/ / /_/ / /  __/
'  \___/\__,_/\___//_/ /_/\__,_/_.___/_/\___/
"""
import logging

# expose the main classes
from .enumerable import Enumerable, IEnumerable
from .deferred import DeferredEnumerator

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    from_mapping,
    from_series,
    each,
    E
)

# expose the iteration protocol helpers
from .types import STOP, NONE, truthy
from .shaping import shape, Step, Single, Multi
from .matching import matches

# the application decides where log records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "IEnumerable",
    "DeferredEnumerator",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "from_mapping",
    "from_series",
    "each",
    "E",
    "STOP",
    "NONE",
    "truthy",
    "shape",
    "Step",
    "Single",
    "Multi",
    "matches"
]
