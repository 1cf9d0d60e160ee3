## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import copy
import math
import functools
import dataclasses
from typing import Any, Callable
from collections.abc import Mapping, MutableMapping, Sequence

from .curry import curry
from .errors import PointTypeError, PointValueError


_SCALARS = (str, bytes, bytearray, int, float, complex, bool)

def _is_index(key: Any) -> bool: return isinstance(key, int) and not isinstance(key, bool)
def _is_namedtuple(x: Any) -> bool: return isinstance(x, tuple) and hasattr(x, '_fields')

def _as_index(key: Any) -> Any:
    # Dotted paths like `items.0` spell list positions as digit strings.
    return int(key) if isinstance(key, str) and key.isascii() and key.isdigit() else key

def _as_path(path: Any) -> list: return [path] if isinstance(path, (str, int)) else list(path)


## BASICS
@curry
def identity(x: Any) -> Any: return x

@curry
def always(value: Any) -> Callable[..., Any]:
    def constant(*args, **kwargs): return value
    return constant


## READING
@curry
def prop(key: Any, store: Any) -> Any:
    """Value at `key` in a mapping, sequence or object; `None` when there is nothing there."""
    if store is None or isinstance(store, _SCALARS):
        return None
    if isinstance(store, Mapping):
        return store.get(key)
    if isinstance(store, Sequence):
        if _is_namedtuple(store) and key in store._fields:
            return getattr(store, key)
        if _is_index(key := _as_index(key)):
            return store[key] if -len(store) <= key < len(store) else None
        return None
    return getattr(store, key, None) if isinstance(key, str) else None

@curry
def prop_path(path: Sequence, store: Any) -> Any:
    for key in _as_path(path):
        if (store := prop(key, store)) is None: return None
    return store

@curry
def props(keys: Sequence, store: Any) -> list: return [prop(k, store) for k in keys]

@curry
def pluck(key: Any, items: Sequence) -> list: return [prop(key, it) for it in items]

@curry
def select_keys(keys: Sequence, mapping: Mapping) -> dict: return {k: mapping[k] for k in keys if k in mapping}


## WRITING (never in-place)
def _assoc_sequence(store: Sequence, index: int, value: Any) -> list:
    items = list(store)
    if index == len(items):
        items.append(value)
    elif -len(items) <= index < len(items):
        items[index] = value
    else:
        raise PointValueError(f"Index {index} out of range for sequence of length {len(items)}.", point_token='assoc')
    return items

@curry
def assoc(key: Any, value: Any, store: Any) -> Any:
    """Shallow copy of `store` with the slot at `key` replaced by `value`."""
    if store is None:
        return {key: value}
    if isinstance(store, _SCALARS):
        raise PointTypeError(f"Cannot associate key {key!r} into {type(store).__name__}.", point_token='assoc')

    if isinstance(store, MutableMapping):
        clone = copy.copy(store)
        clone[key] = value
        return clone
    if isinstance(store, Mapping):
        return {**store, key: value}

    if _is_namedtuple(store) and isinstance(key, str) and not _is_index(_as_index(key)):
        if key not in store._fields:
            raise PointTypeError(f"{type(store).__name__} has no field {key!r}.", point_token='assoc')
        return store._replace(**{key: value})
    if isinstance(store, Sequence) and _is_index(key := _as_index(key)):
        items = _assoc_sequence(store, key, value)
        match store:
            case list(): return type(store)(items) if type(store) is not list else items
            case tuple() if _is_namedtuple(store): return type(store)(*items)
            case tuple(): return tuple(items)
        raise PointTypeError(f"Cannot associate into immutable sequence {type(store).__name__}.", point_token='assoc')
    if isinstance(store, Sequence):
        raise PointTypeError(f"Sequence {type(store).__name__} needs an integer index, got {key!r}.", point_token='assoc')

    if dataclasses.is_dataclass(store) and not isinstance(store, type):
        return dataclasses.replace(store, **{key: value})
    clone = copy.copy(store)
    setattr(clone, key, value)
    return clone

@curry
def assoc_path(path: Sequence, value: Any, store: Any) -> Any:
    if len(path := _as_path(path)) == 0:
        return value
    head, *rest = path
    if rest:
        # Missing containers along the way are created to match the key kind.
        if (child := prop(head, store)) is None:
            child = [] if _is_index(rest[0]) else {}
        value = assoc_path(rest, value, child)
    return assoc(head, value, store)


## COLLECTIONS
@curry
def map_(fn: Callable, coll: Any) -> Any:
    if isinstance(coll, Mapping): return {k: fn(v) for k, v in coll.items()}
    return [fn(x) for x in coll]

@curry
def filter_(pred: Callable, coll: Any) -> Any:
    if isinstance(coll, Mapping): return {k: v for k, v in coll.items() if pred(v)}
    return [x for x in coll if pred(x)]

@curry
def fold(fn: Callable, initial: Any, coll: Any) -> Any: return functools.reduce(fn, coll, initial)

@curry
def map_keys(fn: Callable, keys: Sequence, mapping: Mapping) -> dict:
    return {**mapping, **{k: fn(mapping[k]) for k in keys if k in mapping}}

@curry
def sum_(coll: Any) -> Any: return sum(coll)

@curry
def product(coll: Any) -> Any: return math.prod(coll)


__functions__ = [
    identity, always,
    prop, prop_path, props, pluck, select_keys,
    assoc, assoc_path,
    map_, filter_, fold, map_keys, sum_, product,
]
