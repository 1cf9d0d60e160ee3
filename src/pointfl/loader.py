## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import os
import inspect
from pathlib import Path
from typing import Any, Callable

from .errors import PointArityError, PointModuleError, PointTypeMissing
from .logger import logger


_LIB_MODULES: dict[str, object] = {}

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _resolve_search_paths() -> list[Path]:
    parts = [p for p in os.environ.get("POINTFL_PATH", "").split(os.pathsep) if p]
    return [Path(os.path.expanduser(os.path.expandvars(p))) for p in parts]

def get_public_name(py_name: str) -> str:
    """Map a Python function name to the name it is registered under, `set_` → `set`."""
    return py_name.rstrip('_') or py_name

def get_python_name(name: str) -> str:
    """Inverse of `get_public_name` for lookups, also accepting `lens-prop` for `lens_prop`."""
    return name.replace('-', '_')


def get_signature(*, fn: Callable, name: str | None = None) -> dict:
    """Inspect a callable to find how many positional arguments it needs before it can run.

    Returns a dict with:
        arity:      count of positional parameters without a default value
        required:   names of those parameters, in declaration order
        positional: count of all positional parameters (required or optional)
        variadic:   whether the callable takes `*args`
    """
    fn_name = name or getattr(fn, '__name__', None) or type(fn).__name__
    if not callable(fn):
        raise PointArityError(f"Expected a function for `{fn_name}`, got {type(fn).__name__}.", point_fn=fn, point_token=fn_name)

    try:
        sig = inspect.signature(fn)
    except (ValueError, TypeError) as exc:
        raise PointTypeMissing(f"Signature of `{fn_name}` cannot be inspected; specify its arity explicitly.",
                               point_fn=fn, point_token=fn_name) from exc

    params = list(sig.parameters.values())
    positional = [p for p in params if p.kind in _POSITIONAL]
    required = [p.name for p in positional if p.default is inspect.Parameter.empty]

    return {
        'arity': len(required),
        'required': tuple(required),
        'positional': len(positional),
        'variadic': any(p.kind == inspect.Parameter.VAR_POSITIONAL for p in params),
        'signature': sig,
    }


def load_library_module(ns: str, meta: dict | None = None):
    if ns in _LIB_MODULES: return _LIB_MODULES[ns]

    candidates = [(str(p / f'{ns}.py'), f"pointfl.ext.{ns}") for p in _resolve_search_paths()]

    import importlib.util as importer
    for mod_path, mod_name in candidates:
        if not os.path.isfile(mod_path): continue
        spec, module = importer.spec_from_file_location(mod_name, mod_path), None
        if spec and spec.loader:
            module = importer.module_from_spec(spec)
            try:
                spec.loader.exec_module(module)
            except Exception as e:
                raise PointModuleError(str(e), filename=mod_path, point_token=ns, point_meta=meta) from e
        logger.debug("Loaded extension module `%s` from %s", ns, mod_path)
        _LIB_MODULES[ns] = module
        return module
    raise PointModuleError(f"Module `{ns}` not found.", point_token=ns, point_meta=meta)


def iter_module_functions(ns: str, *, meta: dict | None = None):
    """Yield `(public_name, py_function)` pairs for all functions a module exports."""
    py_module = load_library_module(ns, meta=meta)
    # Modules must list what they export; anything else stays private.
    if not isinstance(registry := getattr(py_module, '__functions__', None), list):
        raise PointModuleError(f"Module `{ns}` is missing function registry `__functions__`.", point_token=ns, point_meta=meta)
    for w in registry:
        if not (py_name := getattr(w, '__name__', '')): continue
        yield get_public_name(py_name), w


def iter_registry(module: Any):
    """Same as `iter_module_functions` for an already imported module."""
    for w in getattr(module, '__functions__', []):
        yield get_public_name(w.__name__), w
