"""
This module implements the time controller that decides how much simulated time each
frame advances.

TimeState carries two independent control axes, the direction of time and the pause
flag, together with a speed multiplier that is set to one of a few presets. frame_delta
derives the signed delta for the current frame: None while paused, so that no step is
taken, otherwise base_frame_scale times the speed multiplier with the sign of the
direction. elapsed_time accumulates the deltas that were actually applied and is kept for
reporting only; the physics never reads it. Each mutator announces the transition on the
console.
"""

from __future__ import annotations
import enum
import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .constants import BASE_FRAME_SCALE, DEFAULT_SPEED, SPEED_PRESETS
from .sim_config import SimConfig


class Direction(enum.Enum):
	FORWARD = 1
	BACKWARD = -1

	@property
	def sign(self) -> float:
		return float(self.value)


@dataclass
class TimeState:
	direction: Direction = Direction.FORWARD
	paused: bool = False
	speed_multiplier: float = DEFAULT_SPEED
	elapsed_time: float = 0.0
	base_frame_scale: float = BASE_FRAME_SCALE
	speed_presets: Tuple[float, ...] = field(default_factory=lambda: tuple(SPEED_PRESETS))

	def __post_init__(self) -> None:
		problems = []
		if not (self.speed_multiplier > 0.0 and math.isfinite(self.speed_multiplier)):
			problems.append(f"speed_multiplier must be positive, got {self.speed_multiplier}")
		if not (self.base_frame_scale > 0.0 and math.isfinite(self.base_frame_scale)):
			problems.append(f"base_frame_scale must be positive, got {self.base_frame_scale}")
		if len(self.speed_presets) == 0:
			problems.append("speed_presets must not be empty")
		for i, s in enumerate(self.speed_presets):
			if not (s > 0.0 and math.isfinite(s)):
				problems.append(f"speed_presets[{i}] must be positive, got {s}")

		if problems:
			for p in problems:
				print(f"[invalid] TimeState: {p}")
			raise ValueError("; ".join(problems))

	@classmethod
	def from_config(cls, cfg: SimConfig) -> "TimeState":
		return cls(
			speed_multiplier=float(cfg.default_speed),
			base_frame_scale=float(cfg.base_frame_scale),
			speed_presets=tuple(float(s) for s in cfg.speed_presets),
		)

	@property
	def forward(self) -> bool:
		return self.direction is Direction.FORWARD

	def set_direction(self, direction: Direction) -> None:
		self.direction = Direction(direction)
		if self.forward:
			print("[control] Moving time forward")
		else:
			print("[control] Moving time backward")

	def toggle_pause(self) -> None:
		self.paused = not self.paused
		print(f"[control] Simulation paused: {self.paused}")

	def set_speed(self, preset: int) -> None:
		if not 0 <= preset < len(self.speed_presets):
			raise IndexError(
				f"speed preset {preset} out of range 0..{len(self.speed_presets) - 1}"
			)
		self.speed_multiplier = float(self.speed_presets[preset])
		print(f"[control] Speed set to {preset + 1}. Speed multiplier: {self.speed_multiplier}")

	def frame_delta(self) -> Optional[float]:
		if self.paused:
			return None
		return self.base_frame_scale * self.speed_multiplier * self.direction.sign

	def record(self, delta_time: float) -> None:
		self.elapsed_time += float(delta_time)
