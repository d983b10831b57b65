import typing
from itertools import count as _count, repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import LazySequence

def from_source(source: Union[Iterable[T], ProductionFunction[T]]) -> 'LazySequence[T]':
    """create a sequence from an iterable or a production function"""
    from .sequence import LazySequence
    return LazySequence(source)

def from_sequence(source: Iterable[T]) -> 'LazySequence[T]':
    """create a fresh sequence replaying an iterable or another sequence"""
    from .sequence import LazySequence
    return LazySequence.from_sequence(source)

def from_range(start: int, count: int) -> 'LazySequence[int]':
    """create sequence of `count` consecutive integers"""
    from .sequence import LazySequence
    return LazySequence(lambda: range(start, start + count))

def repeat(item: T, count: Optional[int] = None) -> 'LazySequence[T]':
    """create sequence with repeated item, endless when count is none"""
    from .sequence import LazySequence
    if count is None:
        return LazySequence(lambda: _repeat(item))
    return LazySequence(lambda: _repeat(item, count))

def count(start: int = 0, step: int = 1) -> 'LazySequence[int]':
    """create endless arithmetic progression"""
    from .sequence import LazySequence
    return LazySequence(lambda: _count(start, step))

def empty() -> 'LazySequence[Any]':
    """create empty sequence"""
    from .sequence import LazySequence
    return LazySequence(lambda: ())

def generate(generator_func: Callable[[], T], count: int) -> 'LazySequence[T]':
    """generate sequence by calling a function `count` times on every iteration"""
    from .sequence import LazySequence
    def generate_data():
        for _ in range(count):
            yield generator_func()
    return LazySequence(generate_data)

# --- aliases ---
L = from_source
