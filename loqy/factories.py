import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable. the data is copied, so the source is never touched."""
    from .enumerable import Enumerable
    return Enumerable(lambda: list(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable of `count` consecutive integers beginning at start"""
    from .enumerable import Enumerable
    from .extensions.numeric import range_from
    return Enumerable(lambda: range_from(start, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [])

# --- aliases ---
loqy = from_iterable
L = from_iterable
