## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable

from .errors import PointArityError, PointValueError


def _check_chain(fns: tuple, where: str) -> None:
    if len(fns) == 0:
        raise PointValueError(f"`{where}` needs at least one function.", point_token=where)
    for i, fn in enumerate(fns):
        if not callable(fn):
            raise PointArityError(f"`{where}` expects functions, got {type(fn).__name__} at position {i+1}.",
                                  point_fn=fn, point_token=where)


def compose(*fns: Callable) -> Callable:
    """Chain functions right to left: `compose(f, g, h)(x) == f(g(h(x)))`.

    Only the rightmost function receives the original arguments, every other one is called
    with the single return value of its right neighbour.
    """
    _check_chain(fns, 'compose')
    *outer, inner = fns

    def composed(*args, **kwargs) -> Any:
        result = inner(*args, **kwargs)
        for fn in reversed(outer):
            result = fn(result)
        return result
    return composed


def pipe(*fns: Callable) -> Callable:
    """Chain functions left to right: `pipe(f, g, h)(x) == h(g(f(x)))`."""
    _check_chain(fns, 'pipe')
    return compose(*reversed(fns))


__functions__ = [ compose, pipe ]
