from __future__ import annotations
from ..types import *


def keys(*mappings: Mapping[K, V]) -> List[K]:
    """every key of every mapping, repeats included"""
    return [k for m in mappings for k in m]


def values(*mappings: Mapping[K, V]) -> List[V]:
    return [v for m in mappings for v in m.values()]


def uniq_keys(*mappings: Mapping[K, V]) -> List[K]:
    """keys across all mappings, first appearance wins"""
    return list(dict.fromkeys(keys(*mappings)))


def uniq_values(*mappings: Mapping[K, V]) -> List[V]:
    return list(dict.fromkeys(values(*mappings)))


def entries(mapping: Mapping[K, V]) -> List[Entry[K, V]]:
    return [Entry(k, v) for k, v in mapping.items()]


to_pairs = entries


def from_entries(pairs: Iterable[Union[Entry[K, V], Tuple[K, V]]]) -> Dict[K, V]:
    """build a dict from entries or (key, value) tuples; later pairs win"""
    result: Dict[K, V] = {}
    for k, v in pairs:
        result[k] = v
    return result


from_pairs = from_entries


def has_key(mapping: Mapping[K, V], key: K) -> bool:
    return key in mapping


def value_or(mapping: Mapping[K, V], key: K, fallback: V) -> V:
    return mapping[key] if key in mapping else fallback


def pick_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> Dict[K, V]:
    return {k: v for k, v in mapping.items() if predicate(k, v)}


def pick_by_keys(mapping: Mapping[K, V], selected: Iterable[K]) -> Dict[K, V]:
    return {k: mapping[k] for k in selected if k in mapping}


def pick_by_values(mapping: Mapping[K, V], selected: Iterable[V]) -> Dict[K, V]:
    wanted = list(selected)
    return {k: v for k, v in mapping.items() if v in wanted}


def omit_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> Dict[K, V]:
    return {k: v for k, v in mapping.items() if not predicate(k, v)}


def omit_by_keys(mapping: Mapping[K, V], omitted: Iterable[K]) -> Dict[K, V]:
    unwanted = set(omitted)
    return {k: v for k, v in mapping.items() if k not in unwanted}


def omit_by_values(mapping: Mapping[K, V], omitted: Iterable[V]) -> Dict[K, V]:
    unwanted = list(omitted)
    return {k: v for k, v in mapping.items() if v not in unwanted}


def invert(mapping: Mapping[K, V]) -> Dict[V, K]:
    """swap keys and values; when values repeat, the last key seen wins"""
    return {v: k for k, v in mapping.items()}


def assign(*mappings: Mapping[K, V]) -> Dict[K, V]:
    """merge left to right, later mappings overwrite earlier ones"""
    result: Dict[K, V] = {}
    for m in mappings:
        result.update(m)
    return result


def map_keys(mapping: Mapping[K, V], iteratee: Callable[[V, K], R]) -> Dict[R, V]:
    """re-key with iteratee(value, key); colliding new keys keep the last value"""
    return {iteratee(v, k): v for k, v in mapping.items()}


def map_values(mapping: Mapping[K, V], iteratee: Callable[[V, K], R]) -> Dict[K, R]:
    return {k: iteratee(v, k) for k, v in mapping.items()}


def map_entries(mapping: Mapping[K, V], iteratee: Callable[[K, V], Tuple[U, R]]) -> Dict[U, R]:
    """rebuild from iteratee(key, value) -> (new_key, new_value)"""
    return from_entries(iteratee(k, v) for k, v in mapping.items())


def map_to_slice(mapping: Mapping[K, V], iteratee: Callable[[K, V], R]) -> List[R]:
    return [iteratee(k, v) for k, v in mapping.items()]
