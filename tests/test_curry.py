## pointfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import inspect

import pytest

from pointfl.curry import Curried, curry, is_curried, partial, partial_r, ary
from pointfl.errors import PointArityError, PointTypeMissing


def add3(a, b, c): return a + b + c


def test_curry_one_at_a_time():
    f = curry(add3)
    assert f(10)(1)(4) == 15


def test_curry_every_split_of_three():
    f = curry(add3)
    assert f(1, 2, 3) == 6
    assert f(1)(2, 3) == 6
    assert f(1, 2)(3) == 6
    assert f(1)(2)(3) == 6


def test_curry_zero_arguments_returns_same_instance():
    f = curry(add3)
    assert f() is f
    g = f(1)
    assert g() is g
    assert g()(2)()(3) == 6


def test_partial_applications_do_not_interfere():
    f = curry(add3)
    one = f(1)
    two, ten = one(2), one(10)
    assert two(3) == 6
    assert ten(3) == 14
    assert one.args == (1,)


def test_curry_does_not_call_until_saturated():
    calls = []
    def record(a, b):
        calls.append((a, b))
        return a * b

    f = curry(record)
    half = f(3)
    assert calls == []
    assert half(4) == 12
    assert calls == [(3, 4)]


def test_extra_arguments_pass_through_positionally():
    def head_and_rest(a, *rest): return (a, rest)
    f = curry(head_and_rest)
    assert f(1, 2, 3) == (1, (2, 3))

    g = curry(add3)
    with pytest.raises(TypeError):
        g(1, 2, 3, 4)


def test_optional_parameters_do_not_count():
    def scaled(x, factor=2): return x * factor
    f = curry(scaled)
    assert f.arity == 1
    assert f(5) == 10
    assert f(5, 3) == 15


def test_arity_zero_and_one_call_directly():
    assert curry(lambda: 42)() == 42
    assert curry(lambda x: x + 1)(1) == 2


def test_trailing_parameter_by_keyword():
    f = curry(add3)
    assert f(c=3)(1, 2) == 6
    assert f(1, 2, c=3) == 6
    assert f(1, c=3).remaining == 1
    assert f(b=2, c=3)(1) == 6


def test_middle_parameter_by_keyword_is_rejected():
    f = curry(add3)
    with pytest.raises(PointArityError, match="`b`"):
        f(1, b=2)
    with pytest.raises(PointArityError):
        f(b=2)
    assert f(1, b=2, c=3) == 6


def test_errors_from_wrapped_function_propagate():
    def fail(a, b): raise KeyError(b)
    with pytest.raises(KeyError):
        curry(fail)(1)(2)


def test_curry_rejects_non_callables():
    with pytest.raises(PointArityError):
        curry(42)
    with pytest.raises(PointArityError):
        curry(None, arity=1)
    with pytest.raises(PointArityError):
        curry(add3, arity=-1)


def test_curry_explicit_arity():
    f = curry(lambda *xs: sum(xs), arity=3)
    assert is_curried(f(1))
    assert f(1)(2)(3) == 6


def test_curry_is_idempotent():
    f = curry(add3)
    assert curry(f) is f
    assert curry(f, arity=3) is f
    assert is_curried(curry(f, arity=2)(1, 2))


def test_curried_signature_reflects_remaining_parameters():
    f = curry(add3)
    assert list(inspect.signature(f).parameters) == ['a', 'b', 'c']
    assert list(inspect.signature(f(1)).parameters) == ['b', 'c']
    assert f(1).remaining == 2 and f(1).arity == 3

    # Currying a partially applied function picks up where it left off.
    assert curry(f(1))(2)(3) == 6


def test_curried_keeps_metadata_and_repr():
    f = curry(add3)
    assert f.__name__ == 'add3'
    assert f.__wrapped__ is add3
    assert repr(f(1)) == "<curried add3(1) awaiting 2>"


def test_curry_decorator():
    @curry
    def between(lo, hi, x): return lo <= x <= hi
    in_range = between(1, 10)
    assert isinstance(in_range, Curried)
    assert in_range(5) and not in_range(11)


def test_partial_binds_prefix():
    assert partial(str.join, ', ')(['a', 'b']) == 'a, b'
    assert partial(add3, 1, 2)(3) == 6


def test_partial_r_binds_suffix():
    def div(a, b): return a / b
    assert partial_r(div, 2)(10) == 5
    assert partial_r(add3, 'b', 'c')('a') == 'abc'


def test_partial_of_curried_keeps_accumulating():
    f = curry(add3)
    g = partial(f, 1)
    assert is_curried(g(2))
    assert g(2)(3) == 6
    assert partial_r(f, 3)(1, 2) == 6


def test_partial_rejects_non_callables():
    with pytest.raises(PointArityError):
        partial('nope', 1)
    with pytest.raises(PointArityError):
        partial_r(None)


def test_ary_caps_arguments():
    unary_upper = ary(str.upper, 1)
    assert unary_upper('nl', 'ignored') == 'NL'
    assert list(map(ary(int, 1), ['1', '2'], [10, 10])) == [1, 2]


def test_uninspectable_builtin_requires_arity(monkeypatch):
    def opaque(*args): return args
    def broken(obj, *a, **kw): raise ValueError("no signature found")
    monkeypatch.setattr(inspect, 'signature', broken)
    with pytest.raises(PointTypeMissing):
        curry(opaque)
