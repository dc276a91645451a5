"""
This module implements the frame driver that composes the body collection, the time
controller and the view state.

Simulation owns the body list exclusively. Each call to advance reads the TimeState,
takes at most one integration step with the derived signed delta, and records the applied
delta in the elapsed time; while paused nothing changes. Control intents are routed to the
time and view state only. snapshot returns numpy copies of positions, velocities and
masses for a renderer, so drawing code cannot reach back into the live bodies. The free
function advance offers the same per-frame step to callers that keep their own collection.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import numpy as np

from .body import Body
from .controls import ControlIntent, apply_intent
from .initial_conditions import InitialConditionGenerator
from .integrator import step
from .sim_config import SimConfig
from .time_control import TimeState
from .trajectory import TrajectoryRecorder
from .view_state import ViewState


def advance(bodies: List[Body], time_state: TimeState, *, log_states: bool = False) -> bool:
	dt = time_state.frame_delta()
	if dt is None:
		return False
	step(bodies, dt, log_states=log_states)
	time_state.record(dt)
	return True


@dataclass(frozen=True)
class WorldSnapshot:
	frame: int
	elapsed_time: float
	masses: np.ndarray
	positions: np.ndarray
	velocities: np.ndarray

	def __len__(self) -> int:
		return int(self.masses.shape[0])


class Simulation:

	def __init__(
		self,
		bodies: List[Body],
		cfg: SimConfig | None = None,
		*,
		time_state: TimeState | None = None,
		view_state: ViewState | None = None,
		recorder: Optional[TrajectoryRecorder] = None,
	) -> None:
		self.cfg: SimConfig = cfg or SimConfig()
		self.cfg.validate()
		self._bodies: List[Body] = list(bodies)
		self.time_state = time_state or TimeState.from_config(self.cfg)
		self.view_state = view_state or ViewState(zoom_step=self.cfg.zoom_step)
		self.recorder = recorder
		self.frame = 0

		if self.recorder is not None:
			self.recorder.record(self.frame, self.time_state.elapsed_time, self._bodies)

	@classmethod
	def from_config(cls, cfg: SimConfig | None = None, **kwargs) -> "Simulation":
		cfg = cfg or SimConfig()
		bodies = InitialConditionGenerator(cfg).generate()
		return cls(bodies, cfg, **kwargs)

	@property
	def n_bodies(self) -> int:
		return len(self._bodies)

	@property
	def bodies(self) -> List[Body]:
		return self._bodies

	def control(self, intent: ControlIntent) -> None:
		apply_intent(intent, self.time_state, self.view_state)

	def advance(self) -> bool:
		self.frame += 1
		stepped = advance(self._bodies, self.time_state, log_states=self.cfg.log_states)
		if stepped and self.recorder is not None:
			self.recorder.record(self.frame, self.time_state.elapsed_time, self._bodies)
		return stepped

	def run(self, n_frames: int) -> int:
		steps = 0
		for _ in range(int(n_frames)):
			if self.advance():
				steps += 1
		return steps

	def snapshot(self) -> WorldSnapshot:
		n = len(self._bodies)
		masses = np.empty(n, dtype=np.float64)
		positions = np.empty((n, 3), dtype=np.float64)
		velocities = np.empty((n, 3), dtype=np.float64)
		for i, b in enumerate(self._bodies):
			masses[i] = b.mass
			positions[i] = b.position.to_array()
			velocities[i] = b.velocity.to_array()
		return WorldSnapshot(
			frame=self.frame,
			elapsed_time=self.time_state.elapsed_time,
			masses=masses,
			positions=positions,
			velocities=velocities,
		)
