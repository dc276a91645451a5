import math

import pytest

from orrery.body import Body
from orrery.vec3 import Vector3


def test_equality_ignores_velocity():
    a = Body(Vector3(1.0, 2.0, 3.0), Vector3(10.0, 0.0, 0.0), 5.0e24)
    b = Body(Vector3(1.0, 2.0, 3.0), Vector3(-3.0, 7.0, 1.0), 5.0e24)
    assert a == b


def test_equality_uses_position_and_mass():
    a = Body(Vector3(1.0, 2.0, 3.0), Vector3.zero(), 5.0e24)
    assert a != Body(Vector3(1.0, 2.0, 3.5), Vector3.zero(), 5.0e24)
    assert a != Body(Vector3(1.0, 2.0, 3.0), Vector3.zero(), 6.0e24)


def test_bodies_are_unhashable():
    with pytest.raises(TypeError):
        hash(Body(Vector3.zero(), Vector3.zero(), 1.0))


@pytest.mark.parametrize("mass", [0.0, -1.0, math.inf, math.nan])
def test_rejects_invalid_mass(mass):
    with pytest.raises(ValueError):
        Body(Vector3.zero(), Vector3.zero(), mass)


def test_repr_mentions_state():
    text = repr(Body(Vector3(1.0, 0.0, 0.0), Vector3.zero(), 2.0))
    assert "mass=2.0" in text
    assert "Vector3(x=1.0" in text


def test_invalid_mass_is_reported(capsys):
    with pytest.raises(ValueError):
        Body(Vector3.zero(), Vector3.zero(), 0.0)
    assert "[invalid] Body: mass" in capsys.readouterr().out
