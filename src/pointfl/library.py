## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable
from dataclasses import dataclass, field, replace

from .curry import curry, is_curried
from .errors import PointNameError
from .loader import get_python_name, get_signature
from .logger import logger


def is_module_name(x):
    return x[0].isalpha() and all(ch.isalpha() or ch.isdigit() or ch == '_' for ch in x[1:])


@dataclass
class Library:
    functions: dict[str, Callable[..., Any]]
    aliases: dict[str, str] = field(default_factory=dict)
    py_module_loader: Callable | None = None
    loaded_modules: set[str] = field(default_factory=set)
    signatures: dict[str, dict] = field(default_factory=dict)

    # Registration helpers
    def add_function(self, name: str, fn: Callable[..., Any], arity: int | None = None) -> None:
        fn, key = curry(fn, arity), get_python_name(name)
        self.signatures[key] = get_signature(fn=fn, name=name)
        self.functions[key] = fn
        logger.debug("Registered `%s` awaiting %d argument(s).", name, fn.remaining)

    def ensure_consistent(self) -> None:
        for name, fn in self.functions.items():
            assert is_curried(fn) and name in self.signatures

    def _maybe_load_py_module(self, resolved_name: str, meta: dict | None) -> None:
        if '.' not in resolved_name or self.py_module_loader is None:
            return
        ns, _ = resolved_name.split('.', 1)
        if is_module_name(ns) and ns not in self.loaded_modules:
            # Load and register all functions from the Python module at once.
            self.py_module_loader(self, ns, meta)

    def _resolve(self, name: str, meta: dict | None) -> str:
        resolved_name = self.aliases.get(key := get_python_name(name), key)
        self._maybe_load_py_module(resolved_name, meta)
        return resolved_name

    def get_function(self, name: str, *, meta: dict | None = None) -> Callable[..., Any]:
        if (function := self.functions.get(self._resolve(name, meta))) is not None:
            return function
        raise PointNameError(f"Function `{name}` not found in library.", point_token=name, point_meta=meta)

    def get_signature(self, name: str, *, meta: dict | None = None) -> dict:
        self.get_function(name, meta=meta)
        return self.signatures[self._resolve(name, meta)]

    def copy(self) -> "Library":
        """Create a new library with its own tables, so registrations don't leak back."""
        return replace(self, functions=dict(self.functions), signatures=dict(self.signatures), aliases=dict(self.aliases), loaded_modules=set(self.loaded_modules))

    def mark_module_loaded(self, ns: str):
        self.loaded_modules.add(ns)
