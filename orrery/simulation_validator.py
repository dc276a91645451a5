"""
This module provides validation utilities for initial world states.

The SimulationValidator class offers static methods to check state validity (positive
finite masses, finite positions and velocities, matching lengths and three components per
vector) and to report the offending values of an invalid state. Validation runs once when
a world is built; the integrator relies on it and does not re-check at step time.
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple
import numpy as np





Vec3 = Tuple[float, float, float]


class SimulationValidator:
	@staticmethod
	def state_is_valid(
		masses: Sequence[float],
		positions: Sequence[Vec3],
		velocities: Sequence[Vec3],
	) -> bool:

		if masses is None or positions is None or velocities is None:
			return False

		m = np.asarray(masses, dtype=float).ravel()
		r = np.asarray(positions, dtype=float)
		v = np.asarray(velocities, dtype=float)

		if m.size == 0:
			return r.size == 0 and v.size == 0

		if r.ndim != 2 or v.ndim != 2 or r.shape != v.shape:
			return False
		if r.shape[0] != m.size or r.shape[1] != 3:
			return False

		for m_i in m:
			if not (m_i > 0.0 and math.isfinite(m_i)):
				return False

		if not np.all(np.isfinite(r)) or not np.all(np.isfinite(v)):
			return False

		return True

	@staticmethod
	def report_invalid_state(
		label: str,
		masses=None,
		positions=None,
		velocities=None,
	) -> None:

		print(f"[invalid] {label}")
		if masses is not None:
			print("masses", masses)
			for i, m_i in enumerate(masses):
				if not (m_i > 0.0 and math.isfinite(m_i)):
					print(f"  mass[{i}] = {m_i} is not a positive finite number")
		if positions is not None:
			print("positions", positions)
			for i, pos in enumerate(positions):
				if len(pos) != 3:
					print(f"  position[{i}] has {len(pos)} dimensions (expected 3)")
		if velocities is not None:
			print("velocities", velocities)
			for i, vel in enumerate(velocities):
				if len(vel) != 3:
					print(f"  velocity[{i}] has {len(vel)} dimensions (expected 3)")
