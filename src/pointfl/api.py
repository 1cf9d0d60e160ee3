## pointfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Constant, Identity, Functor, Bounce
from .errors import *
from .curry import Curried, curry, is_curried, partial, partial_r, ary
from .compose import compose, pipe
from .lens import lens, view, over, set_, lens_prop, lens_path
from .operators import (identity, always, prop, prop_path, props, pluck, select_keys,
                        assoc, assoc_path, map_, filter_, fold, map_keys, sum_, product)
from .combinators import not_, if_else, cond, either, converge, try_catch, memoize, bounce, trampoline
from .parser import parse, parse_path
from .runtime import Runtime

_RUNTIME = Runtime()

def __getattr__(name):
    return getattr(_RUNTIME, name)
