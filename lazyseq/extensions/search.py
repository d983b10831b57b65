from __future__ import annotations
import typing
from collections import deque
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence


def _matches(candidate: Any, search_value: Any) -> bool:
    # same rule as list.index and `in`
    return candidate is search_value or candidate == search_value


class _SearchOperations(Generic[T]):
    """
    positional lookups.
    a negative from_index counts back from the end, which is only known once
    the sequence is exhausted, so those searches always take a full pass.
    """

    def includes(self: 'LazySequence[T]', search_value: T, from_index: int = 0) -> bool:
        """whether search_value occurs at or after from_index"""
        if from_index >= 0:
            for index, value in enumerate(self):
                if index >= from_index and _matches(value, search_value):
                    return True
            return False

        last_found = -1
        length = 0
        for index, value in enumerate(self):
            if _matches(value, search_value):
                last_found = index
            length = index + 1

        if last_found < 0:
            return False
        return last_found >= max(from_index + length, 0)

    def index_of(self: 'LazySequence[T]', search_value: T, from_index: int = 0) -> int:
        """first index >= from_index holding search_value, or -1"""
        if from_index >= 0:
            for index, value in enumerate(self):
                if index >= from_index and _matches(value, search_value):
                    return index
            return -1

        found = []
        length = 0
        for index, value in enumerate(self):
            if _matches(value, search_value):
                found.append(index)
            length = index + 1

        start = max(from_index + length, 0)
        for index in found:
            if index >= start:
                return index
        return -1

    def last_index_of(self: 'LazySequence[T]', search_value: T, from_index: Optional[int] = MISSING) -> int:
        """
        last index <= from_index holding search_value, or -1.
        from_index defaults to the last index; a negative one is offset from the length.
        """
        found = deque()
        length = 0
        for index, value in enumerate(self):
            if _matches(value, search_value):
                # nearest to the end first
                found.appendleft(index)
            length = index + 1

        if not found:
            return -1

        if from_index is MISSING or from_index is None:
            from_index = length - 1
        elif from_index < 0:
            from_index += length

        for index in found:
            if index <= from_index:
                return index
        return -1

    def item_at(self: 'LazySequence[T]', index: int) -> Optional[T]:
        """value at index, or none when out of range. stops pulling once it is found"""
        if index < 0:
            return None
        for position, value in enumerate(self):
            if position == index:
                return value
        return None
