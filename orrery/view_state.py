"""
This module holds the viewport state consumed by whatever draws the world.

ViewState tracks the zoom level and maps world coordinates to screen coordinates. The
star/planet split used for marker sizes is a presentation rule based on a mass threshold;
it has no physical meaning and nothing in the physics layer refers to it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .constants import (
	PIXELS_PER_METER,
	PLANET_RADIUS,
	STAR_MASS_THRESHOLD,
	STAR_RADIUS,
	ZOOM_STEP,
)
from .vec3 import Vector3


@dataclass
class ViewState:
	zoom: float = 1.0
	zoom_step: float = ZOOM_STEP

	def __post_init__(self) -> None:
		problems = []
		if not self.zoom > 0.0:
			problems.append(f"zoom must be positive, got {self.zoom}")
		if not self.zoom_step > 1.0:
			problems.append(f"zoom_step must be greater than 1, got {self.zoom_step}")

		if problems:
			for p in problems:
				print(f"[invalid] ViewState: {p}")
			raise ValueError("; ".join(problems))

	def zoom_in(self) -> None:
		self.zoom *= self.zoom_step
		print(f"[control] Zooming in. Current zoom: {self.zoom}")

	def zoom_out(self) -> None:
		self.zoom /= self.zoom_step
		print(f"[control] Zooming out. Current zoom: {self.zoom}")

	def world_to_screen(self, position: Vector3) -> Tuple[float, float]:
		# projection onto the x/y plane; z is dropped
		return (
			position.x * PIXELS_PER_METER * self.zoom,
			position.y * PIXELS_PER_METER * self.zoom,
		)

	def body_radius(self, mass: float) -> float:
		if mass < STAR_MASS_THRESHOLD:
			return PLANET_RADIUS * self.zoom
		return STAR_RADIUS * self.zoom
