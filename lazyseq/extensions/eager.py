from __future__ import annotations
import typing
import logging
from ..types import *
from ..callbacks import bind
from ..errors import EmptySequenceError

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence

logger = logging.getLogger(__name__)


class _EagerOperations(Generic[T]):
    """operations that iterate right away and return a plain result"""

    @property
    def length(self: 'LazySequence[T]') -> int:
        """number of values. iterates on every access, nothing is cached"""
        count = 0
        for _ in self:
            count += 1
        return count

    def every(self: 'LazySequence[T]', predicate: Predicate, this_arg: Any = MISSING) -> bool:
        """true unless some value fails the predicate; true when empty"""
        check = bind(predicate, this_arg, self)
        for index, value in enumerate(self):
            if not check(value, index, self):
                return False
        return True

    def some(self: 'LazySequence[T]', predicate: Predicate, this_arg: Any = MISSING) -> bool:
        """true as soon as a value passes the predicate; false when empty"""
        check = bind(predicate, this_arg, self)
        for index, value in enumerate(self):
            if check(value, index, self):
                return True
        return False

    def find(self: 'LazySequence[T]', predicate: Predicate, this_arg: Any = MISSING) -> Optional[T]:
        """first value passing the predicate, or none"""
        check = bind(predicate, this_arg, self)
        for index, value in enumerate(self):
            if check(value, index, self):
                return value
        return None

    def find_index(self: 'LazySequence[T]', predicate: Predicate, this_arg: Any = MISSING) -> int:
        """index of the first value passing the predicate, or -1"""
        check = bind(predicate, this_arg, self)
        for index, value in enumerate(self):
            if check(value, index, self):
                return index
        return -1

    def for_each(self: 'LazySequence[T]', action: Action, this_arg: Any = MISSING) -> None:
        """call action(value, index, source) for every value, for its side effects"""
        run = bind(action, this_arg, self)
        for index, value in enumerate(self):
            run(value, index, self)

    def join(self: 'LazySequence[T]', separator: Optional[str] = '') -> str:
        """str() of every value, separated by separator (none means the default)"""
        if separator is None:
            separator = ''
        return str(separator).join(str(value) for value in self)

    def reduce(self: 'LazySequence[T]', reducer: Reducer, initial_value: Any = MISSING) -> Any:
        """
        left fold with reducer(accumulator, value, index, source).

        without an initial value the first value seeds the accumulator and the
        first call sees index 1. an empty sequence returns the initial value,
        or raises EmptySequenceError when none was given.
        """
        fold = bind(reducer, MISSING, self, min_args=2)
        iterator = iter(self)
        if initial_value is MISSING:
            end = object()
            accumulator = next(iterator, end)
            if accumulator is end:
                raise EmptySequenceError("reduce")
            start = 1
        else:
            accumulator = initial_value
            start = 0

        for index, value in enumerate(iterator, start):
            accumulator = fold(accumulator, value, index, self)
        return accumulator

    def reduce_right(self: 'LazySequence[T]', reducer: Reducer, initial_value: Any = MISSING) -> Any:
        """
        right fold: like reduce, but from the last value to the first.
        buffers the whole sequence, since a forward pass cannot run backwards.
        """
        fold = bind(reducer, MISSING, self, min_args=2)
        buffer = self.to_array()
        logger.debug("reduce_right buffered %d values", len(buffer))

        index = len(buffer) - 1
        if initial_value is MISSING:
            if not buffer:
                raise EmptySequenceError("reduce_right")
            accumulator = buffer[index]
            index -= 1
        else:
            accumulator = initial_value

        while index >= 0:
            accumulator = fold(accumulator, buffer[index], index, self)
            index -= 1
        return accumulator

    def to_array(self: 'LazySequence[T]') -> List[T]:
        """every value, in order, as a new list"""
        return list(self)
