from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence


class TerminalAccessor(Generic[T]):
    """exports a sequence into concrete containers. every call iterates the sequence"""

    def __init__(self, sequence_instance: 'LazySequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sequence)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._sequence)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._sequence)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later keys overwriting earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._sequence}

    def array(self, dtype: Any = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._sequence), dtype=dtype)

    def series(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series, indexed by source position"""
        return pd.Series(list(self._sequence), name=name)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe, one row per value"""
        return pd.DataFrame(list(self._sequence))

    def count(self) -> int:
        """same as length"""
        return self._sequence.length
