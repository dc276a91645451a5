from __future__ import annotations
import math
from typing import Sequence, Tuple
import numpy as np

from .body import Body
from .constants import G as G_SI
from .sim_config import SimConfig

"""
This module computes conserved quantities and health metrics for a body collection. The Diagnostics class provides kinetic and potential energy, total energy, linear and angular momentum as 3-vectors, the center of mass position and velocity, the minimum pairwise separation, and a per-frame metrics dictionary. Coincident pairs contribute no potential energy, matching the force model's zero-force policy for them. energy_drift compares the current energy with a reference and emits a rate-limited warning when the relative drift exceeds the configured threshold, so long runs do not flood the console. All quantities are computed from numpy copies of the bodies' state; the bodies themselves are never modified.

"""




class Diagnostics:
	_GLOBAL_DIAG_COUNTS = {}

	def __init__(self, bodies: Sequence[Body], G: float = G_SI, cfg: SimConfig | None = None):
		self.bodies = bodies
		self.G = float(G)
		self.cfg = cfg

	def _arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
		n = len(self.bodies)
		m = np.empty(n, dtype=np.float64)
		pos = np.empty((n, 3), dtype=np.float64)
		vel = np.empty((n, 3), dtype=np.float64)
		for i, b in enumerate(self.bodies):
			m[i] = b.mass
			pos[i] = b.position.to_array()
			vel[i] = b.velocity.to_array()
		return m, pos, vel

	def _pair_distances(self, pos: np.ndarray) -> Tuple[np.ndarray, Tuple[np.ndarray, np.ndarray]]:
		diff = pos[:, None, :] - pos[None, :, :]
		r2 = np.einsum("ijk,ijk->ij", diff, diff, optimize=True)
		iu = np.triu_indices(pos.shape[0], 1)
		return np.sqrt(r2[iu]), iu


	def kinetic_energy(self) -> float:
		m, _, v = self._arrays()
		return 0.5 * float(np.sum(m * np.sum(v * v, axis=1)))

	def potential_energy(self) -> float:
		m, pos, _ = self._arrays()
		if m.size < 2 or self.G == 0.0:
			return 0.0
		r, iu = self._pair_distances(pos)
		mprod = m[iu[0]] * m[iu[1]]
		nonzero = r > 0.0
		return -self.G * float(np.sum(mprod[nonzero] / r[nonzero]))

	def energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def linear_momentum(self) -> np.ndarray:
		m, _, v = self._arrays()
		if m.size == 0:
			return np.zeros(3)
		return np.sum(m[:, None] * v, axis=0)

	def angular_momentum(self) -> np.ndarray:
		m, pos, v = self._arrays()
		if m.size == 0:
			return np.zeros(3)
		return np.sum(m[:, None] * np.cross(pos, v), axis=0)

	def center_of_mass(self) -> Tuple[np.ndarray, np.ndarray]:
		m, pos, v = self._arrays()
		M = float(np.sum(m))
		if M == 0.0:
			return np.zeros(3), np.zeros(3)
		com_pos = np.sum(m[:, None] * pos, axis=0) / M
		com_vel = np.sum(m[:, None] * v, axis=0) / M
		return com_pos, com_vel

	def min_separation(self) -> float:
		_, pos, _ = self._arrays()
		if pos.shape[0] < 2:
			return math.inf
		r, _ = self._pair_distances(pos)
		return float(np.min(r))

	def energy_drift(self, reference_energy: float) -> float:
		E = self.energy()
		if reference_energy != 0.0:
			drift = (E - reference_energy) / abs(reference_energy)
		else:
			drift = E - reference_energy

		threshold = 1e-2
		if self.cfg is not None:
			threshold = float(self.cfg.energy_drift_warn_threshold)
		if not math.isfinite(drift) or abs(drift) > threshold:
			self._rate_limited_diag_print(
				"energy_drift",
				f"[warning] relative energy drift {drift:.3e} exceeds {threshold:.1e}",
			)
		return float(drift)

	def step_metrics(self) -> dict:
		com_pos, com_vel = self.center_of_mass()
		T = self.kinetic_energy()
		V = self.potential_energy()
		return dict(
			T=T,
			V=V,
			E=T + V,
			p_norm=float(np.linalg.norm(self.linear_momentum())),
			L_norm=float(np.linalg.norm(self.angular_momentum())),
			com_drift=float(np.linalg.norm(com_pos)),
			com_speed=float(np.linalg.norm(com_vel)),
			min_sep=self.min_separation(),
		)


	def _rate_limited_diag_print(self, key: str, msg: str) -> None:
		cfg = self.cfg

		if cfg is None:
			enabled = True
			limit = 3
			interval = 1000
		else:
			enabled = bool(cfg.diag_prints)
			limit = int(cfg.diag_print_limit)
			interval = int(cfg.diag_print_interval)
		if not enabled:
			return
		if limit < 0:
			limit = 0
		if interval < 1:
			interval = 1

		counts = Diagnostics._GLOBAL_DIAG_COUNTS
		c = counts.get(key, 0) + 1
		counts[key] = c

		if (c <= limit) or (c % interval == 0):
			if c <= limit:
				suffix = ""
			else:
				suffix = f" (occurrence #{c})"
			print(msg + suffix)
