from __future__ import annotations
import typing
import logging
from functools import cmp_to_key
from ..types import *
from ..callbacks import bind

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence

logger = logging.getLogger(__name__)


def _default_sort_key(value: Any) -> Tuple[bool, str]:
    """string order, with none after everything else"""
    if value is None:
        return True, ''
    return False, str(value)


class _LazyOperations(Generic[T]):
    """operations that return a new sequence and pull nothing until it is iterated"""

    def concat(self: 'LazySequence[T]', *values: Union[T, Iterable[T]]) -> 'LazySequence[T]':
        """append the items of each iterable argument, or the argument itself otherwise"""
        from ..sequence import LazySequence
        source = self

        def concat_data():
            yield from source
            for value in values:
                if is_iterable(value):
                    yield from value
                else:
                    yield value

        return LazySequence(concat_data)

    def entries(self: 'LazySequence[T]') -> 'LazySequence[Tuple[int, T]]':
        """(index, value) pairs in source order"""
        from ..sequence import LazySequence
        source = self

        def entries_data():
            for index, value in enumerate(source):
                yield index, value

        return LazySequence(entries_data)

    def filter(self: 'LazySequence[T]', predicate: Predicate, this_arg: Any = MISSING) -> 'LazySequence[T]':
        """
        keep only the values for which predicate(value, index, source) is truthy.
        the index counts source positions, not positions in the filtered result.
        """
        from ..sequence import LazySequence
        source = self
        check = bind(predicate, this_arg, source)

        def filter_data():
            for index, value in enumerate(source):
                if check(value, index, source):
                    yield value

        return LazySequence(filter_data)

    def keys(self: 'LazySequence[T]') -> 'LazySequence[int]':
        """0..n-1 for a source of n values"""
        from ..sequence import LazySequence
        source = self

        def keys_data():
            index = 0
            for _ in source:
                yield index
                index += 1

        return LazySequence(keys_data)

    def map(self: 'LazySequence[T]', transform: Transform, this_arg: Any = MISSING) -> 'LazySequence[U]':
        """project each value through transform(value, index, source)"""
        from ..sequence import LazySequence
        source = self
        project = bind(transform, this_arg, source)

        def map_data():
            # the counter restarts with every iteration
            for index, value in enumerate(source):
                yield project(value, index, source)

        return LazySequence(map_data)

    def reverse(self: 'LazySequence[T]') -> 'LazySequence[T]':
        """
        the source values back to front.
        each iteration buffers the whole source first, so it never ends on an infinite source.
        """
        from ..sequence import LazySequence
        source = self

        def reverse_data():
            buffer = list(source)
            logger.debug("reverse buffered %d values", len(buffer))
            yield from reversed(buffer)

        return LazySequence(reverse_data)

    def slice(self: 'LazySequence[T]', begin: int = 0, end: Optional[int] = MISSING) -> 'LazySequence[T]':
        """
        values whose source index satisfies begin <= index < end.

        negative bounds are not counted from the end: a negative begin acts as 0
        and a negative end selects nothing. iteration stops pulling once end is
        reached, so a bounded slice of an infinite sequence terminates.
        """
        from ..sequence import LazySequence
        source = self
        bounded = end is not MISSING and end is not None

        def slice_data():
            if bounded and end <= max(begin, 0):
                return
            for index, value in enumerate(source):
                if bounded and index >= end:
                    break
                if index >= begin:
                    yield value

        return LazySequence(slice_data)

    def sort(self: 'LazySequence[T]', compare: Optional[Comparer[T]] = None) -> 'LazySequence[T]':
        """
        the source values in sorted order, leaving the source untouched.

        compare(a, b) returns a negative, zero or positive number. without it,
        values are ordered by str(value) ascending, so [9, 10, 11] sorts to
        [10, 11, 9]; none values go last. the sort is stable.
        """
        from ..sequence import LazySequence
        source = self
        if compare is not None and not callable(compare):
            raise TypeError(f"{compare!r} is not callable")
        key = _default_sort_key if compare is None else cmp_to_key(compare)

        def sort_data():
            buffer = list(source)
            logger.debug("sort buffered %d values", len(buffer))
            buffer.sort(key=key)
            yield from buffer

        return LazySequence(sort_data)

    def values(self: 'LazySequence[T]') -> 'LazySequence[T]':
        """a new sequence replaying this one"""
        return self.concat()
