## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import functools
from typing import Any, Callable, Sequence

from .curry import curry
from .types import Bounce


@curry
def not_(fn: Callable) -> Callable:
    """Complement of a predicate."""
    def complement(*args, **kwargs): return not fn(*args, **kwargs)
    return complement


@curry
def if_else(pred: Callable, on_true: Callable, on_false: Callable) -> Callable:
    """Branch on `pred`, passing the same arguments through to whichever side is chosen."""
    def branch(*args, **kwargs):
        return (on_true if pred(*args, **kwargs) else on_false)(*args, **kwargs)
    return branch


@curry
def cond(pairs: Sequence[tuple[Callable, Callable]]) -> Callable:
    """Returns a function that runs the body of the first `(predicate, body)` pair whose
    predicate holds for its arguments, or returns `None` if none does.
    """
    pairs = [tuple(p) for p in pairs]
    def dispatch(*args, **kwargs):
        for pred, body in pairs:
            if pred(*args, **kwargs): return body(*args, **kwargs)
        return None
    return dispatch


def either(*fns: Callable) -> Callable:
    """First truthy result among `fns` applied to the same arguments, else the last result."""
    def first_truthy(*args, **kwargs):
        result = None
        for fn in fns:
            if (result := fn(*args, **kwargs)): return result
        return result
    return first_truthy


@curry
def converge(after: Callable, branches: Sequence[Callable]) -> Callable:
    """Feed the same arguments into every branch, then combine their results with `after`."""
    branches = list(branches)
    def converged(*args, **kwargs):
        return after(*[b(*args, **kwargs) for b in branches])
    return converged


@curry
def try_catch(tryer: Callable, catcher: Callable) -> Callable:
    """Call `tryer`; if it raises, return `catcher(exc, *args)` instead."""
    def guarded(*args, **kwargs):
        try:
            return tryer(*args, **kwargs)
        except Exception as exc:
            return catcher(exc, *args, **kwargs)
    return guarded


def _cache_key(args: tuple, kwargs: dict) -> str:
    # Same derivation for every call; unhashable arguments (dicts, lists) are fine.
    return repr((args, sorted(kwargs.items())))

@curry
def memoize(fn: Callable) -> Callable:
    cache: dict[str, Any] = {}
    @functools.wraps(fn)
    def memoized(*args, **kwargs):
        if (key := _cache_key(args, kwargs)) not in cache:
            cache[key] = fn(*args, **kwargs)
        return cache[key]
    memoized.cache = cache
    return memoized


def bounce(fn: Callable, *args, **kwargs) -> Bounce:
    """Defer a tail call so `trampoline` can run it without nesting Python frames."""
    return Bounce(fn, args, kwargs or None)

@curry
def trampoline(fn: Callable) -> Callable:
    """Keep calling returned `Bounce` thunks until a plain value comes out.

    >>> def countdown(n): return n if n == 0 else bounce(countdown, n - 1)
    >>> trampoline(countdown)(100_000)
    0
    """
    @functools.wraps(fn)
    def unrolled(*args, **kwargs):
        result = fn(*args, **kwargs)
        while isinstance(result, Bounce):
            result = result()
        return result
    return unrolled


__functions__ = [ not_, if_else, cond, either, converge, try_catch, memoize, bounce, trampoline ]
