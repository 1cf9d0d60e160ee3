## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import json
from typing import Any


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def _to_jsonable(it: Any) -> Any:
    # Sets, tuples and plain objects don't exist in JSON; functions print as their repr.
    if isinstance(it, (set, frozenset)): return sorted(it, key=repr)
    if hasattr(it, '_asdict'): return it._asdict()
    if hasattr(it, '__dict__') and not callable(it): return vars(it)
    return repr(it)

def format_result(it: Any, indent: int | None = None) -> str:
    return json.dumps(it, indent=indent, ensure_ascii=False, default=_to_jsonable)


def parse_value(text: str) -> Any:
    """Read a command-line value as JSON, falling back to the raw string."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def format_signature(name: str, meta: dict, width: int = 24) -> str:
    arity = f"{meta['arity']}" + ('+' if meta['variadic'] else '')
    params = ' '.join(meta['required'])
    return f"\033[97m{name:<{width}}\033[0m {arity:>3}  \033[90m{params}\033[0m"
