from __future__ import annotations
import builtins
import typing
import numpy as np
from itertools import combinations, permutations
from ..config import get_settings
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

Number = Union[int, float]

# sum/max/min/range below shadow the builtins; use builtins.* where the originals are needed.


def sum(collection: Sequence[Number]) -> Number:
    """
    sum of the values, 0 for an empty sequence.
    integers are summed exactly; numpy's fixed-width accumulator is only used otherwise.
    """
    if not collection:
        return 0
    if all(isinstance(item, int) for item in collection):
        return builtins.sum(collection)
    try:
        result = np.sum(collection)
        return result.item() if hasattr(result, 'item') else result
    except (TypeError, ValueError):
        return builtins.sum(collection)


def sum_by(collection: Sequence[T], selector: Selector[T, Number]) -> Number:
    return sum([selector(item) for item in collection])


def product(collection: Sequence[Number]) -> Number:
    """product of the values, 1 for an empty sequence"""
    result = 1
    for item in collection:
        result = result * item
    return result


def mean(collection: Sequence[Number]) -> float:
    """arithmetic mean, 0 for an empty sequence"""
    if not collection:
        return 0
    result = np.mean(collection)
    # object inputs (decimal, fraction) come back as plain python values
    return result.item() if hasattr(result, 'item') else result


def mean_by(collection: Sequence[T], selector: Selector[T, Number]) -> float:
    return mean([selector(item) for item in collection])


def percentile(collection: Sequence[Number], p: float) -> Optional[float]:
    """
    linearly interpolated p-th percentile (0 <= p <= 100).
    none for an empty sequence or a p outside that range.
    """
    if not collection or not 0 <= p <= 100:
        return None
    return float(np.percentile(np.asarray(collection, dtype=float), p))


def median(collection: Sequence[Number]) -> Optional[float]:
    return percentile(collection, 50)


def max(collection: Sequence[T]) -> Optional[T]:
    """largest element, none when empty. a nan in front is replaced by the next value."""
    if not collection:
        return None
    result = collection[0]
    for item in collection[1:]:
        if item > result or result != result:
            result = item
    return result


def min(collection: Sequence[T]) -> Optional[T]:
    if not collection:
        return None
    result = collection[0]
    for item in collection[1:]:
        if item < result or result != result:
            result = item
    return result


def max_by(collection: Sequence[T], greater: Comparison[T]) -> Optional[T]:
    """
    the element e for which no later element x has greater(x, e).
    the first of several equal maxima wins.
    """
    if not collection:
        return None
    result = collection[0]
    for item in collection[1:]:
        if greater(item, result):
            result = item
    return result


def min_by(collection: Sequence[T], less: Comparison[T]) -> Optional[T]:
    if not collection:
        return None
    result = collection[0]
    for item in collection[1:]:
        if less(item, result):
            result = item
    return result


def is_sorted(collection: Sequence[T]) -> bool:
    """non-decreasing order; incomparable neighbours (nan) count as unsorted"""
    return is_sorted_by_key(collection, lambda item: item)


def is_sorted_by_key(collection: Sequence[T], key_selector: KeySelector[T, K]) -> bool:
    keys = [key_selector(item) for item in collection]
    return all(a <= b for a, b in zip(keys, keys[1:]))


def clamp(value: T, lower: T, upper: T) -> T:
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def range(count: int) -> List[int]:
    """[0, 1, ..., count-1], or [0, -1, ..., count+1] for a negative count"""
    step = -1 if count < 0 else 1
    return [i * step for i in builtins.range(abs(count))]


def range_from(start: Number, count: int) -> List[Number]:
    """abs(count) values from start, stepping by +1 (or -1 for negative counts)"""
    step = -1 if count < 0 else 1
    return [start + i * step for i in builtins.range(abs(count))]


def range_with_steps(start: Number, end: Number, step: Number) -> List[Number]:
    """
    values from start towards end (exclusive). a step of zero, or one pointing
    away from end, yields nothing.
    """
    result = []
    if start == end or step == 0:
        return result
    if (start < end) != (step > 0):
        return result
    current = start
    while (current < end) if step > 0 else (current > end):
        result.append(current)
        current = current + step
    return result


def nearest_power_of_two(capacity: int) -> int:
    """smallest power of two >= capacity, capped at the configured maximum"""
    if capacity <= 0:
        return 1
    return builtins.min(1 << (capacity - 1).bit_length(), get_settings().max_capacity)


def interpolate(start: float, end: float) -> Callable[[float], float]:
    """f(t) moving linearly from start (t=0) to end (t=1); t is clamped to [0, 1]"""
    return lambda t: start + (end - start) * clamp(t, 0.0, 1.0)


def combination(collection: Sequence[T], k: int) -> List[List[T]]:
    """all k-element combinations in lexicographic order of position"""
    if k < 0:
        return []
    return [list(c) for c in combinations(collection, k)]


def permutation(collection: Sequence[T]) -> List[List[T]]:
    return [list(p) for p in permutations(collection)]


class StatsAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _get_values(self, selector: Optional[Selector[T, Number]] = None) -> List[Number]:
        """helper to extract numeric values for statistical operations."""
        data = self._enumerable._get_data()
        if selector: return [selector(item) for item in data]
        if data and not all(isinstance(x, (int, float)) for x in data):
            raise TypeError("sequence contains non-numeric types for statistical operation.")
        return data

    def sum(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        return sum(self._get_values(selector))

    def product(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        return product(self._get_values(selector))

    def mean(self, selector: Optional[Selector[T, Number]] = None) -> float:
        return mean(self._get_values(selector))

    def median(self, selector: Optional[Selector[T, Number]] = None) -> Optional[float]:
        return median(self._get_values(selector))

    def percentile(self, p: float, selector: Optional[Selector[T, Number]] = None) -> Optional[float]:
        return percentile(self._get_values(selector), p)

    def max(self) -> Optional[T]:
        return max(self._enumerable._get_data())

    def min(self) -> Optional[T]:
        return min(self._enumerable._get_data())

    def max_by(self, greater: Comparison[T]) -> Optional[T]:
        return max_by(self._enumerable._get_data(), greater)

    def min_by(self, less: Comparison[T]) -> Optional[T]:
        return min_by(self._enumerable._get_data(), less)

    def is_sorted(self, key_selector: Optional[KeySelector[T, K]] = None) -> bool:
        data = self._enumerable._get_data()
        return is_sorted(data) if key_selector is None else is_sorted_by_key(data, key_selector)
