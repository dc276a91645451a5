import pytest

from orrery.body import Body
from orrery.constants import G
from orrery.forces import gravitational_force, net_forces
from orrery.vec3 import Vector3, magnitude, normalize, scale

from .conftest import AU, EARTH_MASS, SUN_MASS


def test_sun_earth_force_magnitude_and_direction(sun_earth):
    sun, earth = sun_earth
    f = gravitational_force(earth, sun)

    expected = G * EARTH_MASS * SUN_MASS / AU ** 2
    assert magnitude(f) == pytest.approx(expected, rel=1e-12)
    # attractive: points from the earth toward the sun, along -x
    assert f.x < 0.0
    assert f.y == 0.0
    assert f.z == 0.0


def test_newtons_third_law(three_stars):
    for a in three_stars:
        for b in three_stars:
            if a is b:
                continue
            assert gravitational_force(a, b) == scale(gravitational_force(b, a), -1.0)


def test_force_is_along_line_joining_bodies(three_stars):
    a, b, _ = three_stars
    f = gravitational_force(a, b)
    toward_b = normalize(b.position - a.position)
    direction = normalize(f)
    assert direction.x == pytest.approx(toward_b.x, rel=1e-12)
    assert direction.y == pytest.approx(toward_b.y, rel=1e-12)
    assert direction.z == pytest.approx(toward_b.z, rel=1e-12)


@pytest.mark.parametrize("m1,m2", [(1.0, 1.0), (1.0e30, 5.0e24), (2.0e30, 2.0e30)])
def test_coincident_bodies_give_zero_force(m1, m2):
    p = Vector3(1.0e10, -3.0e10, 2.0e9)
    a = Body(p, Vector3.zero(), m1)
    b = Body(p, Vector3(5.0, 0.0, 0.0), m2)
    assert gravitational_force(a, b) == Vector3.zero()
    assert gravitational_force(b, a) == Vector3.zero()


def test_custom_gravitational_constant(sun_earth):
    sun, earth = sun_earth
    f_default = gravitational_force(earth, sun)
    f_double = gravitational_force(earth, sun, G=2.0 * G)
    assert magnitude(f_double) == pytest.approx(2.0 * magnitude(f_default), rel=1e-12)


def test_single_body_has_zero_net_force():
    lone = [Body(Vector3(3.0, 4.0, 5.0), Vector3(1.0, 0.0, 0.0), 1.0e30)]
    assert net_forces(lone) == [Vector3.zero()]


def test_net_forces_sum_pairwise_in_order(three_stars):
    a, b, c = three_stars
    forces = net_forces(three_stars)
    assert len(forces) == 3
    assert forces[0] == gravitational_force(a, b) + gravitational_force(a, c)
    assert forces[1] == gravitational_force(b, a) + gravitational_force(b, c)
    assert forces[2] == gravitational_force(c, a) + gravitational_force(c, b)


def test_net_forces_total_is_near_zero(three_stars):
    forces = net_forces(three_stars)
    total = forces[0] + forces[1] + forces[2]
    scale_ref = max(magnitude(f) for f in forces)
    assert magnitude(total) <= 1e-12 * scale_ref


def test_net_forces_does_not_mutate(three_stars):
    before = [(b.position, b.velocity, b.mass) for b in three_stars]
    net_forces(three_stars)
    assert [(b.position, b.velocity, b.mass) for b in three_stars] == before
