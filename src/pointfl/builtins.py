## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from . import curry as Cu
from . import compose as Co
from . import lens as L
from . import operators as O
from . import combinators as C
from .loader import iter_registry
from .library import Library


def load_builtins_library():
    aliases = {
        'comp': 'compose', 'fn': 'identity', 'const': 'always', 'reduce': 'fold',
        'complement': 'not', 'get': 'prop', 'get_in': 'prop_path', 'assoc_in': 'assoc_path',
    }

    lib = Library(functions={}, aliases=aliases)
    for module in (Cu, Co, O, C, L):
        for name, fn in iter_registry(module):
            lib.add_function(name, fn)

    lib.ensure_consistent()
    return lib
