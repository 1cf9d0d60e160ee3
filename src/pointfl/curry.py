## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import inspect
import functools
from typing import Any, Callable

from .errors import PointArityError
from .loader import get_signature


_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class Curried:
    """Function wrapper that collects arguments over several calls, and only invokes the wrapped
    callable once all of its required positional parameters are covered.  Every call that comes up
    short returns a new instance with the extra arguments appended; an instance is never modified.
    """

    def __init__(self, fn: Callable, required: tuple, signature: inspect.Signature | None = None,
                 args: tuple = (), kwargs: dict | None = None):
        functools.update_wrapper(self, fn)
        self.fn = fn
        self.required = required        # parameter names, or `None` when arity was explicit
        self.args = args
        self.kwargs = kwargs or {}
        self._signature = signature
        self.__signature__ = self._remaining_signature()

    @property
    def arity(self) -> int:
        return len(self.required)

    @property
    def remaining(self) -> int:
        return len(self._pending(self.args, self.kwargs))

    def _pending(self, args: tuple, kwargs: dict) -> list:
        pending = list(self.required[len(args):])
        # Only trailing parameters may be supplied by keyword instead.
        while pending and pending[-1] in kwargs:
            pending.pop()
        return pending

    def __call__(self, *args, **kwargs):
        if not args and not kwargs and self.remaining > 0:
            return self

        args, kwargs = self.args + args, {**self.kwargs, **kwargs}
        if (pending := self._pending(args, kwargs)) and (named := [p for p in pending if p in kwargs]):
            name = getattr(self.fn, '__name__', repr(self.fn))
            raise PointArityError(f"Parameter `{named[0]}` of `{name}` can only be given by keyword if every "
                                  f"required parameter after it is too.", point_fn=self.fn, point_token=named[0])
        if pending:
            return Curried(self.fn, self.required, self._signature, args, kwargs)
        return self.fn(*args, **kwargs)

    def _remaining_signature(self) -> inspect.Signature:
        if self._signature is None:
            params = [inspect.Parameter(f'arg{i}', inspect.Parameter.POSITIONAL_ONLY) for i in range(self.remaining)]
            return inspect.Signature(params + [inspect.Parameter('args', inspect.Parameter.VAR_POSITIONAL)])

        pending, skip, params = set(self._pending(self.args, self.kwargs)), len(self.args), []
        for p in self._signature.parameters.values():
            if p.kind in _POSITIONAL and skip > 0:
                skip -= 1
                continue
            if p.name in self.kwargs and p.name not in pending:
                continue
            params.append(p)
        return self._signature.replace(parameters=params)

    def __repr__(self):
        name = getattr(self.fn, '__name__', repr(self.fn))
        applied = [repr(a) for a in self.args] + [f"{k}={v!r}" for k, v in self.kwargs.items()]
        return f"<curried {name}({', '.join(applied)}) awaiting {self.remaining}>"


def curry(fn: Callable, arity: int | None = None) -> Curried:
    """Wrap `fn` so it can be applied to its arguments in any grouping, e.g. `f(1)(2, 3)`.

    The arity is the number of required positional parameters of `fn`, found by inspecting
    its signature once.  Pass `arity` for callables whose signature can't be inspected.
    """
    if isinstance(fn, Curried) and (arity is None or arity == fn.remaining):
        return fn

    if arity is None:
        meta = get_signature(fn=fn)
        return Curried(fn, meta['required'], meta['signature'])

    if not callable(fn):
        raise PointArityError(f"Expected a function to curry, got {type(fn).__name__}.", point_fn=fn)
    if not isinstance(arity, int) or isinstance(arity, bool) or arity < 0:
        raise PointArityError(f"Arity must be a non-negative integer, got {arity!r}.", point_fn=fn)
    return Curried(fn, (None,) * arity)


def is_curried(x: Any) -> bool:
    return isinstance(x, Curried)


def _require_callable(fn: Any, where: str) -> None:
    if not callable(fn):
        raise PointArityError(f"`{where}` expects a function, got {type(fn).__name__}.", point_fn=fn, point_token=where)


def partial(fn: Callable, *bound) -> Callable:
    """Pre-bind the leftmost arguments: `partial(f, a)(b, c) == f(a, b, c)`."""
    _require_callable(fn, 'partial')
    def partially_applied(*rest, **kwargs):
        return fn(*bound, *rest, **kwargs)
    return partially_applied


def partial_r(fn: Callable, *bound) -> Callable:
    """Pre-bind the rightmost arguments: `partial_r(f, c)(a, b) == f(a, b, c)`."""
    _require_callable(fn, 'partial_r')
    def partially_applied(*rest, **kwargs):
        return fn(*rest, *bound, **kwargs)
    return partially_applied


@curry
def ary(fn: Callable, n: int) -> Callable:
    """Cap the number of positional arguments passed on to `fn`."""
    _require_callable(fn, 'ary')
    def capped(*args, **kwargs):
        return fn(*args[:n], **kwargs)
    return capped


__functions__ = [ curry, partial, partial_r, ary ]
