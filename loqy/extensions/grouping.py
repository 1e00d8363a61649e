from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def group_by(collection: Sequence[T], key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
    """group elements by key; each group keeps the original relative order"""
    groups = defaultdict(list)
    for item in collection:
        groups[key_selector(item)].append(item)
    return dict(groups)


def partition_by(collection: Sequence[T], key_selector: KeySelector[T, K]) -> List[List[T]]:
    """
    split into groups of equal key, ordered by each key's first appearance.
    elements need not be adjacent to land in the same group.
    """
    # key -> position of its group in result
    positions: Dict[K, int] = {}
    result: List[List[T]] = []
    for item in collection:
        key = key_selector(item)
        if key in positions:
            result[positions[key]].append(item)
        else:
            positions[key] = len(result)
            result.append([item])
    return result


def uniq(collection: Sequence[T]) -> List[T]:
    """distinct elements, first occurrence wins, order preserved"""
    return uniq_by(collection, lambda item: item)


def uniq_by(collection: Sequence[T], key_selector: KeySelector[T, K]) -> List[T]:
    """distinct by extracted key, first occurrence wins"""
    seen_hashable = set()
    seen_other = []  # unhashable keys fall back to an equality scan
    result = []
    for item in collection:
        key = key_selector(item)
        try:
            if key in seen_hashable:
                continue
            seen_hashable.add(key)
        except TypeError:
            if key in seen_other:
                continue
            seen_other.append(key)
        result.append(item)
    return result


def count(collection: Sequence[T], value: T) -> int:
    """number of elements equal to value"""
    return sum(1 for item in collection if item == value)


def count_by(collection: Sequence[T], predicate: Predicate[T]) -> int:
    return sum(1 for item in collection if predicate(item))


def count_values(collection: Sequence[T]) -> Dict[T, int]:
    """occurrence histogram, keys in order of first appearance"""
    return count_values_by(collection, lambda item: item)


def count_values_by(collection: Sequence[T], mapper: Selector[T, K]) -> Dict[K, int]:
    result: Dict[K, int] = {}
    for item in collection:
        key = mapper(item)
        result[key] = result.get(key, 0) + 1
    return result


def key_by(collection: Sequence[V], key_selector: KeySelector[V, K]) -> Dict[K, V]:
    """map key -> element; the last element with a given key wins"""
    return {key_selector(item): item for item in collection}


def associate(collection: Sequence[T], transform: Callable[[T], Tuple[K, V]]) -> Dict[K, V]:
    """map built from (key, value) pairs produced per element; last pair wins"""
    result: Dict[K, V] = {}
    for item in collection:
        key, value = transform(item)
        result[key] = value
    return result


slice_to_map = associate


class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements by a key"""
        return group_by(self._enumerable._get_data(), key_selector)

    def partition_by(self, key_selector: KeySelector[T, K]) -> 'Enumerable[List[T]]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: partition_by(self._enumerable._get_data(), key_selector))

    def uniq(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """distinct elements, optionally by key. preserves order of first appearance."""
        from ..enumerable import Enumerable
        if key_selector is None:
            return Enumerable(lambda: uniq(self._enumerable._get_data()))
        return Enumerable(lambda: uniq_by(self._enumerable._get_data(), key_selector))

    def count(self, value: T) -> int:
        return count(self._enumerable._get_data(), value)

    def count_by(self, predicate: Predicate[T]) -> int:
        return count_by(self._enumerable._get_data(), predicate)

    def count_values(self, mapper: Optional[Selector[T, K]] = None) -> Dict[Any, int]:
        data = self._enumerable._get_data()
        return count_values(data) if mapper is None else count_values_by(data, mapper)

    def key_by(self, key_selector: KeySelector[T, K]) -> Dict[K, T]:
        return key_by(self._enumerable._get_data(), key_selector)

    def associate(self, transform: Callable[[T], Tuple[K, V]]) -> Dict[K, V]:
        return associate(self._enumerable._get_data(), transform)
