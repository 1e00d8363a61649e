"""
string helpers. the case converters all go through words(), a small state
machine over character classes (upper, lower, digit, separator).
"""
from typing import List
from ..common import clamp_index
from ..config import get_settings


def _is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def words(text: str) -> List[str]:
    """
    split text into words on separators, lower->upper changes, letter<->digit
    changes, and before the last capital of an acronym that runs into a
    lowercase letter ("HTTPRequest" -> ["HTTP", "Request"]).
    any non-alphanumeric character is a separator and is dropped.
    """
    result: List[str] = []
    current: List[str] = []
    prev = ''

    def flush():
        if current:
            result.append(''.join(current))
            current.clear()

    for i, c in enumerate(text):
        nxt = text[i + 1] if i + 1 < len(text) else ''

        if not c.isalnum():
            flush()
            prev = c
            continue

        if c.isupper():
            if prev.islower() or _is_digit(prev) or nxt.islower():
                flush()
        elif _is_digit(c):
            if not _is_digit(prev):
                flush()
        elif _is_digit(prev):
            flush()

        current.append(c)
        prev = c

    flush()
    return result


def capitalize(text: str) -> str:
    """first character upper-cased, the rest lower-cased"""
    if not text:
        return ''
    return text[0].upper() + text[1:].lower()


def pascal_case(text: str) -> str:
    return ''.join(capitalize(word) for word in words(text))


def camel_case(text: str) -> str:
    parts = words(text)
    if not parts:
        return ''
    return parts[0].lower() + ''.join(capitalize(word) for word in parts[1:])


def snake_case(text: str) -> str:
    return '_'.join(word.lower() for word in words(text))


def kebab_case(text: str) -> str:
    return '-'.join(word.lower() for word in words(text))


def ellipsis(text: str, length: int) -> str:
    """trim whitespace, then cut to `length` characters ending in the ellipsis marker"""
    marker = get_settings().ellipsis_marker
    trimmed = text.strip()
    if len(trimmed) <= length:
        return trimmed
    if len(trimmed) < len(marker) or length < len(marker):
        return marker
    return trimmed[:length - len(marker)] + marker


def substring(text: str, offset: int, length: int) -> str:
    """up to `length` characters from `offset`; negative offsets count from the end"""
    start = clamp_index(len(text), offset)
    return text[start:start + max(length, 0)]


def char_length(text: str) -> int:
    """number of code points"""
    return len(text)


def chunk_string(text: str, size: int) -> List[str]:
    """
    split into pieces of `size` characters. the empty string yields [''].
    """
    if size <= 0:
        raise ValueError("chunk_string size must be greater than 0")
    if not text:
        return ['']
    return [text[i:i + size] for i in range(0, len(text), size)]
