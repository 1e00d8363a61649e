from __future__ import annotations
import typing
from itertools import chain, dropwhile, zip_longest
from ..common import clamp_index, normalize_index
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def chunk(collection: Sequence[T], size: int) -> List[List[T]]:
    """consecutive groups of `size`; the last group may be shorter"""
    if size <= 0:
        raise ValueError("chunk size must be greater than 0")
    return [list(collection[i:i + size]) for i in range(0, len(collection), size)]


def flatten(collections: Iterable[Iterable[T]]) -> List[T]:
    """concatenate one level of nesting, preserving order"""
    return list(chain.from_iterable(collections))


def interleave(collections: Iterable[Sequence[T]]) -> List[T]:
    """
    round-robin across the sequences. a sequence that runs out simply stops
    contributing while the others continue.
    """
    sentinel = object()
    return [item for row in zip_longest(*collections, fillvalue=sentinel)
            for item in row if item is not sentinel]


def splice(collection: Sequence[T], index: int, elements: Sequence[T]) -> List[T]:
    """
    insert `elements` before position `index` without replacing anything.
    indexes past the end insert at the end, indexes before -len insert at the start.
    """
    position = clamp_index(len(collection), index)
    return list(collection[:position]) + list(elements) + list(collection[position:])


def slice(collection: Sequence[T], start: int, end: int) -> List[T]:
    """elements in [start, end); both bounds may be negative and are clamped"""
    size = len(collection)
    lower, upper = clamp_index(size, start), clamp_index(size, end)
    if lower >= upper:
        return []
    return list(collection[lower:upper])


def subset(collection: Sequence[T], offset: int, length: int) -> List[T]:
    """up to `length` elements starting at `offset` (negative counts from the end)"""
    start = clamp_index(len(collection), offset)
    return list(collection[start:start + max(length, 0)])


def drop(collection: Sequence[T], n: int) -> List[T]:
    """remove the first n elements"""
    return list(collection[max(n, 0):])


def drop_right(collection: Sequence[T], n: int) -> List[T]:
    """remove the last n elements"""
    if n <= 0:
        return list(collection)
    return list(collection[:max(len(collection) - n, 0)])


def drop_while(collection: Sequence[T], predicate: Predicate[T]) -> List[T]:
    return list(dropwhile(predicate, collection))


def drop_right_while(collection: Sequence[T], predicate: Predicate[T]) -> List[T]:
    end = len(collection)
    while end > 0 and predicate(collection[end - 1]):
        end -= 1
    return list(collection[:end])


def drop_by_index(collection: Sequence[T], *indexes: int) -> List[T]:
    """
    remove the elements at the given positions. negative positions count from the
    end, positions that do not exist are ignored, repeats collapse.
    """
    size = len(collection)
    doomed = {normalize_index(size, i) for i in indexes} - {None}
    return [item for i, item in enumerate(collection) if i not in doomed]


def reverse(collection: Sequence[T]) -> List[T]:
    return list(reversed(collection))


def fill(collection: Sequence[Any], value: T) -> List[T]:
    """a list as long as `collection` holding `value` everywhere"""
    return [value] * len(collection)


def repeat(count: int, value: T) -> List[T]:
    return [value] * max(count, 0)


def repeat_by(count: int, generator: Callable[[int], T]) -> List[T]:
    """[generator(0), ..., generator(count - 1)]"""
    return [generator(i) for i in range(max(count, 0))]


class ShapeAccessor(Generic[T]):
    """structural reshaping; every method is lazy and returns a new enumerable"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _wrap(self, operation: Callable[[List[T]], List[Any]]) -> 'Enumerable[Any]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: operation(self._enumerable._get_data()))

    def chunk(self, size: int) -> 'Enumerable[List[T]]':
        """split into chunks of specified size"""
        if size <= 0:
            raise ValueError("chunk size must be greater than 0")
        return self._wrap(lambda data: chunk(data, size))

    def flatten(self) -> 'Enumerable[Any]':
        return self._wrap(flatten)

    def interleave(self) -> 'Enumerable[Any]':
        """treat the elements as sequences and interleave them"""
        return self._wrap(interleave)

    def interleave_with(self, *others: Sequence[T]) -> 'Enumerable[T]':
        """interleave this sequence with others, this one first"""
        return self._wrap(lambda data: interleave([data, *others]))

    def splice(self, index: int, elements: Sequence[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: splice(data, index, elements))

    def slice(self, start: int, end: int) -> 'Enumerable[T]':
        return self._wrap(lambda data: slice(data, start, end))

    def subset(self, offset: int, length: int) -> 'Enumerable[T]':
        return self._wrap(lambda data: subset(data, offset, length))

    def drop(self, n: int) -> 'Enumerable[T]':
        return self._wrap(lambda data: drop(data, n))

    def drop_right(self, n: int) -> 'Enumerable[T]':
        return self._wrap(lambda data: drop_right(data, n))

    def drop_while(self, predicate: Predicate[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: drop_while(data, predicate))

    def drop_right_while(self, predicate: Predicate[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: drop_right_while(data, predicate))

    def drop_by_index(self, *indexes: int) -> 'Enumerable[T]':
        return self._wrap(lambda data: drop_by_index(data, *indexes))

    def reverse(self) -> 'Enumerable[T]':
        return self._wrap(reverse)

    def fill(self, value: U) -> 'Enumerable[U]':
        return self._wrap(lambda data: fill(data, value))
