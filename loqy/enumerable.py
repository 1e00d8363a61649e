from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.transform import _CoreOperations

# --- accessors ---
from .extensions.search import SearchAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.shape import ShapeAccessor
from .extensions.sampling import SamplingAccessor
from .extensions.numeric import StatsAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        return f"Enumerable({self._get_data()!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, cached sequence wrapper exposing the loqy functions fluently."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.search = SearchAccessor(self)
        self.group = GroupingAccessor(self)
        self.shape = ShapeAccessor(self)
        self.rand = SamplingAccessor(self)
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)
