import numpy as np
import pytest

from orrery.initial_conditions import InitialConditionGenerator, bodies_from_arrays
from orrery.sim_config import SimConfig
from orrery.vec3 import Vector3


def test_default_world_layout():
    bodies = InitialConditionGenerator(SimConfig(seed=1)).generate()
    assert len(bodies) == 4
    for star in bodies[:3]:
        assert 1.0e30 <= star.mass < 2.0e30
    assert 1.0e24 <= bodies[3].mass < 1.0e25
    for b in bodies:
        assert all(-1.0e11 <= c < 1.0e11 for c in b.position)
        assert b.velocity == Vector3.zero()


def test_seed_is_reproducible():
    a = InitialConditionGenerator(SimConfig(seed=42)).generate()
    b = InitialConditionGenerator(SimConfig(seed=42)).generate()
    c = InitialConditionGenerator(SimConfig(seed=43)).generate()
    assert a == b
    assert a != c


def test_custom_counts():
    cfg = SimConfig(n_stars=1, n_planets=5, seed=3)
    bodies = InitialConditionGenerator(cfg).generate()
    assert len(bodies) == 6
    assert sum(b.mass >= 1.0e30 for b in bodies) == 1


def test_invalid_mass_range_rejected(capsys):
    with pytest.raises(ValueError):
        InitialConditionGenerator(SimConfig(star_mass_range=(0.0, 1.0e30)))
    assert "[invalid]" in capsys.readouterr().out


def test_bodies_from_arrays_defaults_velocities():
    bodies = bodies_from_arrays([1.0, 2.0], [[0.0, 0.0, 0.0], [1.0, 2.0, 3.0]])
    assert bodies[1].position == Vector3(1.0, 2.0, 3.0)
    assert bodies[1].velocity == Vector3.zero()


@pytest.mark.parametrize(
    "masses,positions",
    [
        ([1.0, 0.0], [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]]),
        ([1.0, -3.0], [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]]),
        ([1.0], [[0.0, 0.0]]),
        ([1.0], [[np.inf, 0.0, 0.0]]),
        ([1.0, 2.0], [[0.0, 0.0, 0.0]]),
    ],
)
def test_bodies_from_arrays_rejects_invalid_state(masses, positions, capsys):
    with pytest.raises(ValueError):
        bodies_from_arrays(masses, positions)
    assert "[invalid] bodies_from_arrays" in capsys.readouterr().out
