## pointfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import dataclasses

import pytest

from pointfl.types import Constant, Identity, Bounce


def test_constant_map_keeps_value():
    c = Constant.of(3)
    assert c.map(lambda x: x * 100) == Constant(3)
    assert c.map(lambda x: x * 100).extract() == 3


def test_constant_map_never_calls_fn():
    def explode(_): raise AssertionError("should not be called")
    assert Constant.of('a').map(explode).extract() == 'a'


def test_identity_map_applies_fn():
    i = Identity.of(3)
    assert i.map(lambda x: x * 100) == Identity(300)
    assert i.extract() == 3


def test_functors_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Identity.of(1).value = 2
    assert Identity(1) != Constant(1)


def test_bounce_runs_deferred_call():
    b = Bounce(divmod, (7, 2))
    assert b() == (3, 1)
    assert Bounce(dict, (), {'a': 1})() == {'a': 1}
