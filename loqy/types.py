from dataclasses import dataclass
from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Sequence, Mapping, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
R = TypeVar('R')

Predicate = Callable[[T], bool]
IndexedPredicate = Callable[[T, int], bool]
Selector = Callable[[T], U]
Iteratee = Callable[[T, int], U]
KeySelector = Callable[[T], K]
Comparison = Callable[[T, T], bool]
Accumulator = Callable[[U, T, int], U]


class LoqyError(Exception):
    """base class for errors raised by loqy"""


class NthIndexError(LoqyError, IndexError):
    """raised when nth() is asked for a position the sequence does not have"""

    def __init__(self, index: int):
        super().__init__(f"nth: {index} out of slice bounds")
        self.index = index


@dataclass(frozen=True)
class Entry(Generic[K, V]):
    """a single key/value pair taken from a mapping"""
    key: K
    value: V

    def __iter__(self):
        # allows `k, v = entry`
        yield self.key
        yield self.value


class DurationUnit(Enum):
    """units accepted by duration_between, valued in seconds"""
    SECONDS = 1
    MINUTES = 60
    HOURS = 3_600
    DAYS = 86_400
    WEEKS = 604_800
    MONTHS = 2_629_746   # average month, 30.44 days
    YEARS = 31_557_600   # 365.25 days

    @property
    def seconds(self) -> int: return self.value
