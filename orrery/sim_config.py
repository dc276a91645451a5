from __future__ import annotations
from dataclasses import dataclass, field
import math
from typing import Optional, Tuple

from .constants import BASE_FRAME_SCALE, DEFAULT_SPEED, SPEED_PRESETS, ZOOM_STEP

"""
This central configuration module defines all simulation parameters through the SimConfig dataclass. Key parameters include the number of stars and planets in the initial world, their mass bands, the half-width of the cube positions are sampled from, the random seed, the time-control values (base frame scale, starting speed multiplier and speed presets), the zoom step, and the console reporting switches. The class provides a copy method for configuration inheritance and a validate method that rejects malformed values before a world is built. It serves as the single source of truth for simulation behavior, with all components referencing this configuration.

"""

MassRange = Tuple[float, float]


@dataclass
class SimConfig:
	n_stars: int = 3
	n_planets: int = 1
	star_mass_range: MassRange = (1.0e30, 2.0e30)
	planet_mass_range: MassRange = (1.0e24, 1.0e25)
	position_bound: float = 1.0e11
	seed: Optional[int] = None
	base_frame_scale: float = BASE_FRAME_SCALE
	default_speed: float = DEFAULT_SPEED
	speed_presets: Tuple[float, ...] = field(default_factory=lambda: tuple(SPEED_PRESETS))
	zoom_step: float = ZOOM_STEP
	log_states: bool = False
	diag_prints: bool = True
	diag_print_limit: int = 3
	diag_print_interval: int = 1000
	energy_drift_warn_threshold: float = 1e-2

	def copy(self) -> "SimConfig":
		new = object.__new__(SimConfig)
		new.__dict__ = dict(getattr(self, "__dict__", {}))
		return new

	def validate(self) -> None:
		problems = []
		if self.n_stars < 0 or self.n_planets < 0:
			problems.append("body counts must be non-negative")
		for label, rng in (("star_mass_range", self.star_mass_range),
						   ("planet_mass_range", self.planet_mass_range)):
			lo, hi = float(rng[0]), float(rng[1])
			if not (math.isfinite(lo) and math.isfinite(hi)):
				problems.append(f"{label} must be finite")
			elif lo <= 0.0 or hi < lo:
				problems.append(f"{label} must satisfy 0 < low <= high, got {rng}")
		if not (self.position_bound > 0.0 and math.isfinite(self.position_bound)):
			problems.append("position_bound must be a positive finite number")
		if not self.base_frame_scale > 0.0:
			problems.append("base_frame_scale must be positive")
		if not self.default_speed > 0.0:
			problems.append("default_speed must be positive")
		if len(self.speed_presets) == 0 or any(not (s > 0.0 and math.isfinite(s)) for s in self.speed_presets):
			problems.append("speed_presets must be a non-empty tuple of positive finite values")
		if not self.zoom_step > 1.0:
			problems.append("zoom_step must be greater than 1")

		if problems:
			for p in problems:
				print(f"[invalid] SimConfig: {p}")
			raise ValueError("; ".join(problems))
