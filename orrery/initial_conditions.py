"""
This module builds the initial world: a handful of stars and planets at rest.

The InitialConditionGenerator samples each body's position uniformly from the cube
[-position_bound, position_bound) on every axis and its mass uniformly from the star or
planet mass band configured in SimConfig. All velocities start at zero. Stars are
generated first, then planets, so the collection order is stable for a given seed.
bodies_from_arrays converts explicit mass/position/velocity arrays into bodies. Both paths
validate the complete state before returning and raise ValueError for a state that would
break the positive-mass invariant, so the integrator never sees a zero or negative mass.
"""

from __future__ import annotations

import numpy as np
from typing import List, Optional, Sequence

from .body import Body
from .sim_config import SimConfig
from .simulation_validator import SimulationValidator
from .vec3 import Vector3




def bodies_from_arrays(
	masses: Sequence[float],
	positions: Sequence[Sequence[float]],
	velocities: Optional[Sequence[Sequence[float]]] = None,
) -> List[Body]:
	if velocities is None:
		velocities = np.zeros((len(masses), 3), dtype=float)

	if not SimulationValidator.state_is_valid(masses, positions, velocities):
		SimulationValidator.report_invalid_state(
			"bodies_from_arrays", masses=masses, positions=positions, velocities=velocities
		)
		raise ValueError("invalid initial state: masses must be positive and vectors finite 3-tuples")

	bodies = []
	for m, p, v in zip(masses, positions, velocities):
		bodies.append(Body(Vector3.from_array(p), Vector3.from_array(v), float(m)))
	return bodies


class InitialConditionGenerator:

	def __init__(self, config: SimConfig | None = None):
		self.config: SimConfig = config or SimConfig()
		self.config.validate()
		self._rng = np.random.default_rng(self.config.seed)


	def _sample_position(self) -> np.ndarray:
		bound = float(self.config.position_bound)
		return self._rng.uniform(-bound, bound, 3)

	def _sample_mass(self, mass_range) -> float:
		lo, hi = mass_range
		return float(self._rng.uniform(lo, hi))

	def _sample_band(self, n: int, mass_range):
		masses, positions = [], []
		for _ in range(n):
			positions.append(self._sample_position())
			masses.append(self._sample_mass(mass_range))
		return masses, positions

	def generate(self) -> List[Body]:
		star_m, star_p = self._sample_band(self.config.n_stars, self.config.star_mass_range)
		planet_m, planet_p = self._sample_band(self.config.n_planets, self.config.planet_mass_range)

		masses = star_m + planet_m
		positions = np.asarray(star_p + planet_p, dtype=float).reshape(-1, 3)
		return bodies_from_arrays(masses, positions)
