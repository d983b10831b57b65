from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)
from collections import abc as _abc

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# callbacks receive (value, index, source); shorter signatures get a prefix
Predicate = Callable[..., Any]
Transform = Callable[..., U]
Action = Callable[..., Any]
Reducer = Callable[..., U]
Comparer = Callable[[T, T], Any]
KeySelector = Callable[[T], K]
Selector = Callable[[T], U]

ProductionFunction = Callable[[], Iterable[T]]


class _Missing:
    """marks an omitted optional argument, distinct from none or any falsy value"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def is_iterable(value: Any) -> bool:
    """true when iter() accepts value, checked without calling iter()"""
    if isinstance(value, _abc.Iterable):
        return True
    # old-style sequence protocol
    return getattr(type(value), '__getitem__', None) is not None and not callable(value)
