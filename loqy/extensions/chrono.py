from __future__ import annotations
from datetime import datetime
from ..types import *


def earliest(*times: datetime) -> Optional[datetime]:
    """the earliest of the given datetimes, none when called with none"""
    if not times:
        return None
    result = times[0]
    for item in times[1:]:
        if item < result:
            result = item
    return result


def latest(*times: datetime) -> Optional[datetime]:
    if not times:
        return None
    result = times[0]
    for item in times[1:]:
        if item > result:
            result = item
    return result


def earliest_by(collection: Sequence[T], selector: Callable[[T], datetime]) -> Optional[T]:
    """element with the earliest projected time; the first one wins ties"""
    if not collection:
        return None
    best, best_time = collection[0], selector(collection[0])
    for item in collection[1:]:
        item_time = selector(item)
        if item_time < best_time:
            best, best_time = item, item_time
    return best


def latest_by(collection: Sequence[T], selector: Callable[[T], datetime]) -> Optional[T]:
    """element with the latest projected time; the first one wins ties"""
    if not collection:
        return None
    best, best_time = collection[0], selector(collection[0])
    for item in collection[1:]:
        item_time = selector(item)
        if item_time > best_time:
            best, best_time = item, item_time
    return best


def duration_between(start: datetime, end: datetime, unit: DurationUnit = DurationUnit.SECONDS) -> int:
    """whole `unit`s between two datetimes, regardless of their order"""
    delta = abs(end - start)
    return int(delta.total_seconds()) // unit.seconds
