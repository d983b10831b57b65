r"""
'    _
'   | | __ _ _____   _ ___  ___  __ _
'   | |/ _` |_  / | | / __|/ _ \/ _` |
'   | | (_| |/ /| |_| \__ \  __/ (_| |
'   |_|\__,_/___|\__, |___/\___|\__, |
'                |___/             |_|

deferred, re-iterable sequences with array-like operations.
"""
import logging

# expose the main class
from .sequence import LazySequence

# expose the factory functions
from .factories import (
    from_source,
    from_sequence,
    from_range,
    repeat,
    count,
    empty,
    generate,
    L
)

# expose the error types
from .errors import (
    LazySequenceError,
    InvalidSourceError,
    EmptySequenceError
)

# expose supporting classes
from .callbacks import Callback
from .extensions.terminal import TerminalAccessor

# library code never configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "LazySequence",
    "from_source",
    "from_sequence",
    "from_range",
    "repeat",
    "count",
    "empty",
    "generate",
    "L",
    "LazySequenceError",
    "InvalidSourceError",
    "EmptySequenceError",
    "Callback",
    "TerminalAccessor"
]
