from __future__ import annotations

import logging
import reprlib
from abc import ABC, abstractmethod
from .types import *
from .errors import InvalidSourceError

# --- operations ---
from .extensions.lazy import _LazyOperations
from .extensions.eager import _EagerOperations
from .extensions.search import _SearchOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """start a fresh, independent iteration"""
        pass

# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    def __init__(self, source: Union[Iterable[T], ProductionFunction[T]]):
        """
        wrap an iterable, or a zero-argument function returning an iterable.

        an iterable is re-iterated from scratch on every pass, which replays
        lists, tuples, ranges and other sequences. a generator object can only
        be consumed once; pass the generator function itself to get a sequence
        that can be iterated again.
        """
        if source is None:
            logger.debug("rejected None source")
            raise InvalidSourceError(source)

        if is_iterable(source):
            self._produce: ProductionFunction[T] = lambda: source
        elif callable(source):
            self._produce = source
        else:
            logger.debug("rejected source of type %s", type(source).__name__)
            raise InvalidSourceError(source)
        self._source = source

    def __iter__(self) -> Iterator[T]:
        # every call runs the production function again
        return iter(self._produce())

# --- main sequence class ---

class LazySequence(
    _BaseSequence[T],
    _LazyOperations[T],
    _EagerOperations[T],
    _SearchOperations[T]
):
    """
    a re-iterable, deferred sequence with the array-like operations of
    filter/map/reduce fame. lazy operations return new sequences and pull
    nothing; eager ones iterate on the spot and return plain values.
    """
    def __init__(self, source: Union[Iterable[T], ProductionFunction[T]]):
        super().__init__(source)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @classmethod
    def from_sequence(cls, source: Iterable[T]) -> 'LazySequence[T]':
        """a new sequence replaying the values of source, which may itself be a lazy sequence"""
        if source is None or not is_iterable(source):
            raise InvalidSourceError(source)
        return cls(lambda: iter(source))

    def __repr__(self) -> str:
        # never iterates
        return f"{type(self).__name__}({reprlib.repr(self._source)})"
