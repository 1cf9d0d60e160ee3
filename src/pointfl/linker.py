## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any

from .compose import pipe
from .errors import PointError
from .library import Library


def link(node: tuple, lib: Library) -> Any:
    """Resolve a parsed expression into Python values, with names looked up in the library and
    calls applied to their (curried) functions as they are linked.
    """
    match node:
        case ('value', value):
            return value
        case ('array', items):
            return [link(it, lib) for it in items]
        case ('object', pairs):
            return {k: link(v, lib) for k, v in pairs}
        case ('ref', name, meta):
            return lib.get_function(name, meta=meta)
        case ('call', name, args, meta):
            fn = lib.get_function(name, meta=meta)
            values = [link(a, lib) for a in args]
            try:
                return fn(*values)
            except PointError as exc:
                if exc.point_meta is None: exc.point_meta = meta
                exc.point_token = exc.point_token or name
                raise
        case ('pipeline', [stage], _):
            return link(stage, lib)
        case ('pipeline', stages, _):
            return pipe(*[link(s, lib) for s in stages])
    raise NotImplementedError(f"Unexpected node `{node[0]}` while linking.")
