from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from .grouping import key_by, associate, count_by
from .search import find_index_of
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class TerminalAccessor(Generic[T]):
    """eager conversions out of an enumerable. every call hands back fresh containers."""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        # a copy; the cached data is never handed out
        return list(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        return set(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, Any]:
        """key_by, or associate when a value selector is given. the last element per key wins."""
        data = self._enumerable._get_data()
        if value_selector is None:
            return key_by(data, key_selector)
        return associate(data, lambda item: (key_selector(item), value_selector(item)))

    def pandas(self) -> pd.Series:
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """one row per element; dicts and namedtuples become columns"""
        return pd.DataFrame(self._enumerable._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        data = self._enumerable._get_data()
        if predicate is None:
            return len(data)
        return count_by(data, predicate)

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        data = self._enumerable._get_data()
        if predicate is None:
            return len(data) > 0
        return find_index_of(data, predicate) is not None

    def all(self, predicate: Predicate[T]) -> bool:
        return find_index_of(self._enumerable._get_data(), lambda x: not predicate(x)) is None
