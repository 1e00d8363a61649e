from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

# map/filter/reduce below shadow the builtins for the rest of this module.


def map(collection: Sequence[T], iteratee: Iteratee[T, U]) -> List[U]:
    """apply iteratee(item, index) to every element"""
    return [iteratee(item, i) for i, item in enumerate(collection)]


def filter(collection: Sequence[T], predicate: IndexedPredicate[T]) -> List[T]:
    """keep elements where predicate(item, index) is true"""
    return [item for i, item in enumerate(collection) if predicate(item, i)]


def reject(collection: Sequence[T], predicate: IndexedPredicate[T]) -> List[T]:
    """keep elements where predicate(item, index) is false"""
    return [item for i, item in enumerate(collection) if not predicate(item, i)]


def filter_map(collection: Sequence[T], callback: Callable[[T, int], Tuple[U, bool]]) -> List[U]:
    """callback returns (value, keep); values with keep=True are collected"""
    result = []
    for i, item in enumerate(collection):
        value, keep = callback(item, i)
        if keep:
            result.append(value)
    return result


def reject_map(collection: Sequence[T], callback: Callable[[T, int], Tuple[U, bool]]) -> List[U]:
    """the complement of filter_map: values whose flag is false are collected"""
    result = []
    for i, item in enumerate(collection):
        value, flag = callback(item, i)
        if not flag:
            result.append(value)
    return result


def flat_map(collection: Sequence[T], iteratee: Callable[[T, int], Iterable[U]]) -> List[U]:
    """map each element to a sequence and concatenate the results in order"""
    return list(chain.from_iterable(iteratee(item, i) for i, item in enumerate(collection)))


def reduce(collection: Sequence[T], accumulator: Accumulator[U, T], initial: U) -> U:
    """left fold, accumulator(acc, item, index)"""
    acc = initial
    for i, item in enumerate(collection):
        acc = accumulator(acc, item, i)
    return acc


def reduce_right(collection: Sequence[T], accumulator: Accumulator[U, T], initial: U) -> U:
    """right fold; indexes passed are the original positions"""
    acc = initial
    for i in range(len(collection) - 1, -1, -1):
        acc = accumulator(acc, collection[i], i)
    return acc


def foreach(collection: Sequence[T], iteratee: Callable[[T, int], Any]) -> None:
    for i, item in enumerate(collection):
        iteratee(item, i)


def foreach_while(collection: Sequence[T], iteratee: Callable[[T, int], bool]) -> None:
    """visit in order, stopping at the first element for which iteratee returns falsy"""
    for i, item in enumerate(collection):
        if not iteratee(item, i):
            break


def filter_reject(collection: Sequence[T], predicate: IndexedPredicate[T]) -> Tuple[List[T], List[T]]:
    """single pass split into (kept, rejected)"""
    kept, rejected = [], []
    for i, item in enumerate(collection):
        (kept if predicate(item, i) else rejected).append(item)
    return kept, rejected


def times(count: int, iteratee: Callable[[int], U]) -> List[U]:
    """[iteratee(0), ..., iteratee(count - 1)]"""
    return [iteratee(i) for i in range(max(count, 0))]


def compact(collection: Sequence[T]) -> List[T]:
    """drop falsy values (0, '', None, False, empty containers)"""
    return [item for item in collection if item]


def replace(collection: Sequence[T], old: T, new: T, n: int) -> List[T]:
    """copy with the first `n` occurrences of `old` swapped for `new`; n < 0 means all"""
    result = list(collection)
    remaining = n
    for i, item in enumerate(result):
        if remaining == 0:
            break
        if item == old:
            result[i] = new
            remaining -= 1
    return result


def replace_all(collection: Sequence[T], old: T, new: T) -> List[T]:
    return replace(collection, old, new, -1)


class _CoreOperations(Generic[T]):
    def map(self: 'Enumerable[T]', iteratee: Iteratee[T, U]) -> 'Enumerable[U]':
        """project each element, the callback also receives its index"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: map(self._get_data(), iteratee))

    def filter(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: filter(self._get_data(), predicate))

    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter with a predicate that only takes the element"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [x for x in self._get_data() if predicate(x)])

    def reject(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: reject(self._get_data(), predicate))

    def filter_map(self: 'Enumerable[T]', callback: Callable[[T, int], Tuple[U, bool]]) -> 'Enumerable[U]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: filter_map(self._get_data(), callback))

    def reject_map(self: 'Enumerable[T]', callback: Callable[[T, int], Tuple[U, bool]]) -> 'Enumerable[U]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: reject_map(self._get_data(), callback))

    def flat_map(self: 'Enumerable[T]', iteratee: Callable[[T, int], Iterable[U]]) -> 'Enumerable[U]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: flat_map(self._get_data(), iteratee))

    def compact(self: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: compact(self._get_data()))

    def replace(self: 'Enumerable[T]', old: T, new: T, n: int = -1) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: replace(self._get_data(), old, new, n))

    # --- eager terminals ---

    def reduce(self: 'Enumerable[T]', accumulator: Accumulator[U, T], initial: U) -> U:
        return reduce(self._get_data(), accumulator, initial)

    def reduce_right(self: 'Enumerable[T]', accumulator: Accumulator[U, T], initial: U) -> U:
        return reduce_right(self._get_data(), accumulator, initial)

    def foreach(self: 'Enumerable[T]', iteratee: Callable[[T, int], Any]) -> 'Enumerable[T]':
        """
        eager side-effect visit. returns the same enumerable so calls can be chained.
        """
        foreach(self._get_data(), iteratee)
        return self

    def foreach_while(self: 'Enumerable[T]', iteratee: Callable[[T, int], bool]) -> 'Enumerable[T]':
        foreach_while(self._get_data(), iteratee)
        return self

    def filter_reject(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> Tuple[List[T], List[T]]:
        return filter_reject(self._get_data(), predicate)
