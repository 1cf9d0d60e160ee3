## pointfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable
from dataclasses import dataclass


# Functor pair used by lenses.  Both variants hold exactly one value and share the
# `of` / `map` / `extract` shape; only `map` differs.

@dataclass(frozen=True)
class Constant:
    """Holds a value that `map` refuses to change, which makes lenses read-only."""
    value: Any

    @classmethod
    def of(cls, value: Any) -> "Constant":
        return cls(value)

    def map(self, fn: Callable[[Any], Any]) -> "Constant":
        return Constant(self.value)

    def extract(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Identity:
    """Holds a value that `map` transforms, which makes lenses write back."""
    value: Any

    @classmethod
    def of(cls, value: Any) -> "Identity":
        return cls(value)

    def map(self, fn: Callable[[Any], Any]) -> "Identity":
        return Identity(fn(self.value))

    def extract(self) -> Any:
        return self.value


Functor = Constant | Identity

# lift(focused) -> Functor, then store -> Functor wrapping the result.
Lift = Callable[[Any], Functor]
Lens = Callable[[Lift], Callable[[Any], Functor]]


@dataclass(frozen=True)
class Bounce:
    """Deferred tail call, unrolled by `trampoline` instead of growing the Python stack."""
    fn: Callable[..., Any]
    args: tuple = ()
    kwargs: dict | None = None

    def __call__(self):
        return self.fn(*self.args, **(self.kwargs or {}))
