from __future__ import annotations
import logging
import typing
from collections import Counter
from ..common import normalize_index
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


# --- predicate search ---

def find(collection: Sequence[T], predicate: Predicate[T]) -> Optional[T]:
    """first element satisfying the predicate, or none"""
    for item in collection:
        if predicate(item):
            return item
    return None


def find_or_else(collection: Sequence[T], fallback: T, predicate: Predicate[T]) -> T:
    """first element satisfying the predicate, or the fallback"""
    for item in collection:
        if predicate(item):
            return item
    return fallback


def find_index_of(collection: Sequence[T], predicate: Predicate[T]) -> Optional[Tuple[T, int]]:
    """(element, index) of the first match"""
    for i, item in enumerate(collection):
        if predicate(item):
            return item, i
    return None


def find_last_index_of(collection: Sequence[T], predicate: Predicate[T]) -> Optional[Tuple[T, int]]:
    """(element, index) of the last match"""
    for i in range(len(collection) - 1, -1, -1):
        if predicate(collection[i]):
            return collection[i], i
    return None


# --- equality search, -1 when absent ---

def index_of(collection: Sequence[T], value: T) -> int:
    for i, item in enumerate(collection):
        if item == value:
            return i
    return -1


def last_index_of(collection: Sequence[T], value: T) -> int:
    for i in range(len(collection) - 1, -1, -1):
        if collection[i] == value:
            return i
    return -1


# --- mapping lookups ---

def find_key(mapping: Mapping[K, V], value: V) -> Optional[K]:
    """
    a key whose value equals `value`.
    when several keys match, which one is returned is not part of the contract.
    """
    for k, v in mapping.items():
        if v == value:
            return k
    return None


def find_key_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> Optional[K]:
    """a key for which predicate(key, value) holds"""
    for k, v in mapping.items():
        if predicate(k, v):
            return k
    return None


# --- duplicates and uniques ---

def find_duplicates(collection: Sequence[T]) -> List[T]:
    """
    for every value seen more than once, the element at its second occurrence,
    in the order those second occurrences appear.
    """
    return find_duplicates_by(collection, lambda item: item)


def find_duplicates_by(collection: Sequence[T], key_selector: KeySelector[T, K]) -> List[T]:
    """find_duplicates comparing by an extracted key"""
    # key -> already reported
    seen: Dict[K, bool] = {}
    result = []
    for item in collection:
        key = key_selector(item)
        if key not in seen:
            seen[key] = False
        elif not seen[key]:
            result.append(item)
            seen[key] = True
    return result


def find_uniques(collection: Sequence[T]) -> List[T]:
    """elements that occur exactly once, in original order"""
    return find_uniques_by(collection, lambda item: item)


def find_uniques_by(collection: Sequence[T], key_selector: KeySelector[T, K]) -> List[T]:
    keys = [key_selector(item) for item in collection]
    counts = Counter(keys)
    return [item for item, key in zip(collection, keys) if counts[key] == 1]


# --- positional access ---

def first(collection: Sequence[T]) -> Tuple[Optional[T], bool]:
    """(first element, True), or (None, False) for an empty sequence"""
    if collection:
        return collection[0], True
    return None, False


def last(collection: Sequence[T]) -> Tuple[Optional[T], bool]:
    if collection:
        return collection[-1], True
    return None, False


def first_or(collection: Sequence[T], fallback: T) -> T:
    return collection[0] if collection else fallback


def last_or(collection: Sequence[T], fallback: T) -> T:
    return collection[-1] if collection else fallback


def first_or_empty(collection: Sequence[T], empty: Optional[T] = None) -> Optional[T]:
    """first element, or the type's empty value (none unless given)"""
    return first_or(collection, empty)


def last_or_empty(collection: Sequence[T], empty: Optional[T] = None) -> Optional[T]:
    return last_or(collection, empty)


def nth(collection: Sequence[T], index: int) -> T:
    """
    element at `index`, counting from the end when negative.
    raises NthIndexError when the position does not exist.
    """
    position = normalize_index(len(collection), index)
    if position is None:
        logger.debug(f"nth: index {index} outside sequence of length {len(collection)}")
        raise NthIndexError(index)
    return collection[position]


class SearchAccessor(Generic[T]):
    """searching operations over an enumerable's materialized data"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def find(self, predicate: Predicate[T]) -> Optional[T]:
        return find(self._enumerable._get_data(), predicate)

    def find_or_else(self, fallback: T, predicate: Predicate[T]) -> T:
        return find_or_else(self._enumerable._get_data(), fallback, predicate)

    def find_index_of(self, predicate: Predicate[T]) -> Optional[Tuple[T, int]]:
        return find_index_of(self._enumerable._get_data(), predicate)

    def find_last_index_of(self, predicate: Predicate[T]) -> Optional[Tuple[T, int]]:
        return find_last_index_of(self._enumerable._get_data(), predicate)

    def index_of(self, value: T) -> int:
        return index_of(self._enumerable._get_data(), value)

    def last_index_of(self, value: T) -> int:
        return last_index_of(self._enumerable._get_data(), value)

    def duplicates(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """lazy find_duplicates / find_duplicates_by"""
        from ..enumerable import Enumerable
        if key_selector is None:
            return Enumerable(lambda: find_duplicates(self._enumerable._get_data()))
        return Enumerable(lambda: find_duplicates_by(self._enumerable._get_data(), key_selector))

    def uniques(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """lazy find_uniques / find_uniques_by"""
        from ..enumerable import Enumerable
        if key_selector is None:
            return Enumerable(lambda: find_uniques(self._enumerable._get_data()))
        return Enumerable(lambda: find_uniques_by(self._enumerable._get_data(), key_selector))

    def first(self) -> Tuple[Optional[T], bool]:
        return first(self._enumerable._get_data())

    def last(self) -> Tuple[Optional[T], bool]:
        return last(self._enumerable._get_data())

    def first_or(self, fallback: T) -> T:
        return first_or(self._enumerable._get_data(), fallback)

    def last_or(self, fallback: T) -> T:
        return last_or(self._enumerable._get_data(), fallback)

    def nth(self, index: int) -> T:
        return nth(self._enumerable._get_data(), index)
