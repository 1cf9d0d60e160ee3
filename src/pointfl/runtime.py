## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable

from .errors import PointArityError
from .parser import parse, parse_path
from .linker import link
from .library import Library
from .builtins import load_builtins_library
from .loader import iter_module_functions, get_python_name
from .lens import lens_path, view as _view, over as _over, set_ as _set
from .logger import logger


class Runtime:
    """Minimal facade for compiling point-free expressions and applying them to documents."""

    def __init__(self, library: Library | None = None):
        self.library = library or load_builtins_library()
        self.library.py_module_loader = self._py_loader

    def _py_loader(self, lib: Library, ns: str, meta: dict | None) -> None:
        for name, py_fn in iter_module_functions(ns, meta=meta):
            lib.add_function(f"{ns}.{name}", py_fn)
        lib.mark_module_loaded(ns)

    # Compilation ─────────────────────────────────────────────────────────────────────────────
    def compile(self, expression: str, filename: str | None = None) -> Callable:
        fn = link(parse(expression, filename=filename), self.library)
        if not callable(fn):
            raise PointArityError(f"Expression `{expression}` evaluates to {type(fn).__name__}, not a function.",
                                  point_token=expression)
        logger.debug("Compiled `%s` into %r", expression, fn)
        return fn

    def function(self, name: str) -> Callable:
        return self.library.get_function(name)

    # Execution ───────────────────────────────────────────────────────────────────────────────
    def run(self, expression: str, data: Any, filename: str | None = None) -> Any:
        return self.compile(expression, filename=filename)(data)

    def view_path(self, path: str, data: Any) -> Any:
        return _view(lens_path(parse_path(path)), data)

    def set_path(self, path: str, value: Any, data: Any) -> Any:
        return _set(lens_path(parse_path(path)), value, data)

    def over_path(self, path: str, expression: str, data: Any) -> Any:
        return _over(lens_path(parse_path(path)), self.compile(expression), data)

    # Registration ────────────────────────────────────────────────────────────────────────────
    def register_function(self, name: str, func: Callable, arity: int | None = None) -> None:
        self.library.add_function(name, func, arity)

    def alias(self, name: str, target: str) -> None:
        self.library.aliases[get_python_name(name)] = get_python_name(target)

    # Introspection ───────────────────────────────────────────────────────────────────────────
    def get_signature(self, name: str) -> dict:
        return self.library.get_signature(name)

    def list_functions(self) -> dict[str, dict]:
        return dict(sorted(self.library.signatures.items()))
