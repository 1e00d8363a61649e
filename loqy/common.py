import random
import threading
from typing import Optional

_local = threading.local()


def normalize_index(length: int, index: int) -> Optional[int]:
    """
    turn a possibly negative index into a forward one.
    returns none when the position does not exist in a sequence of `length` items.
    """
    candidate = length + index if index < 0 else index
    if 0 <= candidate < length:
        return candidate
    return None


def clamp_index(length: int, index: int) -> int:
    """like normalize_index, but out-of-range positions snap to 0 or length"""
    candidate = length + index if index < 0 else index
    return min(max(candidate, 0), length)


def random_source() -> random.Random:
    """the calling thread's private generator, created on first use"""
    rng = getattr(_local, 'rng', None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng
