from __future__ import annotations
import logging
import string
import typing
from ..common import random_source
from ..config import get_settings
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

LOWER_CASE_LETTERS = string.ascii_lowercase
UPPER_CASE_LETTERS = string.ascii_uppercase
LETTERS = string.ascii_letters
NUMBERS = string.digits
ALPHANUMERIC = LETTERS + NUMBERS
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;':\",./<>?"
ALL_CHARACTERS = ALPHANUMERIC + SPECIAL_CHARACTERS


def sample(collection: Sequence[T], empty: Optional[T] = None) -> Optional[T]:
    """one uniformly chosen element, or `empty` when there is nothing to choose from"""
    if not collection:
        logger.debug("sample: empty collection, returning the empty value")
        return empty
    return collection[random_source().randrange(len(collection))]


def samples(collection: Sequence[T], count: int) -> List[T]:
    """
    `count` distinct positions chosen uniformly without replacement.
    asking for more than there are returns every element in random order.
    """
    if count < 0:
        raise ValueError("samples count must not be negative")
    if not collection:
        logger.debug("samples: empty collection, returning no samples")
        return []
    return random_source().sample(list(collection), min(count, len(collection)))


def shuffle(collection: Sequence[T]) -> List[T]:
    """a uniformly random permutation; the input is left untouched"""
    shuffled = list(collection)
    rng = random_source()
    # fisher-yates
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def random_string(size: int, charset: Optional[Sequence[str]] = None) -> str:
    """`size` characters, each drawn independently from charset"""
    chars = get_settings().default_charset if charset is None else charset
    if size <= 0:
        logger.debug(f"random_string: rejected size {size}")
        raise ValueError("random_string size must be greater than 0")
    if not chars:
        logger.debug("random_string: rejected empty charset")
        raise ValueError("random_string charset must not be empty")
    return ''.join(random_source().choices(list(chars), k=size))


class SamplingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def sample(self, empty: Optional[T] = None) -> Optional[T]:
        return sample(self._enumerable._get_data(), empty)

    def samples(self, count: int) -> 'Enumerable[T]':
        """random sampling without replacement. each evaluation draws once and caches."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: samples(self._enumerable._get_data(), count))

    def shuffle(self) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: shuffle(self._enumerable._get_data()))
