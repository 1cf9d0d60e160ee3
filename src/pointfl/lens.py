## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable, Sequence

from .curry import curry, _require_callable
from .types import Constant, Identity, Lens, Lift
from .operators import always, prop, prop_path, assoc, assoc_path


@curry
def lens(getter: Callable[[Any], Any], setter: Callable[[Any, Any], Any]) -> Lens:
    """Returns a lens focusing on the part of a store that `getter` reads and `setter` replaces.

    The lens takes a lifting function that wraps the focused value into a functor, then a store.
    Lifting into `Constant` makes the setter a no-op (used by `view`), lifting into `Identity`
    runs the setter on the transformed value (used by `over` and `set_`).  Lenses compose with
    `compose(outer, inner)`, focusing `inner` within the part `outer` points at.
    """
    _require_callable(getter, 'lens')
    _require_callable(setter, 'lens')

    def with_lift(lift: Lift) -> Callable[[Any], Any]:
        def on_store(store):
            return lift(getter(store)).map(lambda replacement: setter(replacement, store))
        return on_store
    return with_lift


@curry
def view(lens: Lens, store: Any) -> Any:
    """Returns the value in `store` that the lens focuses on."""
    _require_callable(lens, 'view')
    return lens(Constant.of)(store).extract()


@curry
def over(lens: Lens, fn: Callable[[Any], Any], store: Any) -> Any:
    """Returns a copy of `store` where the focused value is replaced by `fn` applied to it."""
    _require_callable(lens, 'over')
    _require_callable(fn, 'over')
    return lens(lambda focused: Identity.of(fn(focused)))(store).extract()


@curry
def set_(lens: Lens, value: Any, store: Any) -> Any:
    """Returns a copy of `store` where the focused value is replaced by `value`."""
    _require_callable(lens, 'set')
    return over(lens, always(value), store)


@curry
def lens_prop(key: Any) -> Lens:
    return lens(prop(key), assoc(key))


@curry
def lens_path(path: Sequence) -> Lens:
    return lens(prop_path(path), assoc_path(path))


__functions__ = [ lens, view, over, set_, lens_prop, lens_path ]
