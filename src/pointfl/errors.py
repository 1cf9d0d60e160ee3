## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark


class PointError(Exception):
    """Base class for all errors raised by pointfl itself."""

    def __init__(self, message: str = "", *, point_fn=None, point_token=None, point_meta=None):
        super().__init__(message)
        self.point_fn: object = point_fn
        self.point_token: str = point_token
        self.point_meta: dict = point_meta

class PointParseError(PointError):
    """A pipeline expression or a lens path is not valid syntax.

    `kind` tells which grammar rejected the text, `'expression'` or `'path'`, and the position
    is also kept in `point_meta` in the same shape the linker uses for names.
    """

    def __init__(self, message, *, kind='expression', filename=None, line=None, column=None, token=None):
        meta = {'filename': filename, 'line': line, 'columns': (column, column)}
        super().__init__(message, point_token=token, point_meta=meta)
        self.kind = kind
        self.filename = filename
        self.line = line
        self.column = column
        self.token = token

class PointIncompleteParse(PointParseError, lark.exceptions.ParseError):
    """The text ended before the expression or path was complete, e.g. `pluck("qty" |`."""

class PointNameError(PointError, NameError):
    """An expression names a function that is not registered in the library."""

class PointValueError(PointError, ValueError):
    """An empty `compose`/`pipe` chain, or a list index out of range for `assoc`."""


class PointArityError(PointError, TypeError):
    """A function was required but something else was supplied, or the arity is unusable."""

class PointTypeMissing(PointError, TypeError):
    """The signature of a callable could not be inspected and no arity was given."""

class PointTypeError(PointError, TypeError):
    """A value of the wrong kind was given, e.g. a string where a container is expected."""


class PointImportError(PointError, ImportError):
    """An extension module from `POINTFL_PATH` could not be loaded; `filename` is its path."""

    def __init__(self, message, *, point_fn=None, point_token=None, filename=None, point_meta=None):
        super().__init__(message, point_fn=point_fn, point_token=point_token, point_meta=point_meta)
        self.filename = filename

class PointModuleError(PointImportError):
    """An extension module is missing, failed while importing, or lacks `__functions__`."""
