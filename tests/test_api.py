## pointfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

import pointfl.api as P


def test_api_exposes_core_functions():
    total_qty = P.pipe(P.pluck('qty'), P.sum_)
    assert total_qty([{'qty': 1}, {'qty': 2}]) == 3
    assert P.view(P.lens_prop('a'), {'a': 1}) == 1
    assert P.set_(P.lens_path(['a', 'b']), 2, {}) == {'a': {'b': 2}}
    assert P.curry(lambda a, b: a - b)(5)(3) == 2


def test_api_forwards_to_default_runtime():
    assert P.run('pluck("qty") | sum', [{'qty': 2}, {'qty': 2}]) == 4
    assert P.compile('prop("a")')({'a': 'x'}) == 'x'
    assert P.view_path('a.b', {'a': {'b': 3}}) == 3
    assert P.get_signature('pluck')['arity'] == 2


def test_api_register_function():
    P.register_function('api_shout', str.upper, arity=1)
    assert P.run('map(api_shout)', ['a', 'b']) == ['A', 'B']


def test_api_errors_are_catchable_by_builtin_kind():
    with pytest.raises(NameError):
        P.run('no_such_function', None)
    with pytest.raises(TypeError):
        P.curry(42)
    with pytest.raises(ValueError):
        P.compose()
    with pytest.raises(P.PointError):
        P.parse('(')


def test_api_unknown_attribute():
    with pytest.raises(AttributeError):
        P.not_a_real_attribute
