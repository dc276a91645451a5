import pytest

from orrery.body import Body
from orrery.diagnostics import Diagnostics
from orrery.vec3 import Vector3


EARTH_MASS = 5.972e24
SUN_MASS = 1.989e30
AU = 1.496e11


@pytest.fixture(autouse=True)
def _reset_diag_counts():
    Diagnostics._GLOBAL_DIAG_COUNTS.clear()
    yield
    Diagnostics._GLOBAL_DIAG_COUNTS.clear()


@pytest.fixture
def sun_earth():
    sun = Body(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 0.0), SUN_MASS)
    earth = Body(Vector3(AU, 0.0, 0.0), Vector3(0.0, 29.78e3, 0.0), EARTH_MASS)
    return [sun, earth]


@pytest.fixture
def three_stars():
    return [
        Body(Vector3(-5.0e10, 1.0e10, 0.0), Vector3.zero(), 1.2e30),
        Body(Vector3(4.0e10, -2.0e10, 3.0e10), Vector3.zero(), 1.7e30),
        Body(Vector3(1.0e10, 6.0e10, -2.0e10), Vector3.zero(), 1.5e30),
    ]
