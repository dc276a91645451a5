from __future__ import annotations
from typing import List

from .body import Body
from .constants import G
from .forces import net_forces

"""
This module advances the body collection by one time step using semi-implicit Euler integration. A step runs in two phases: the net force on every body is first computed from the unmodified collection, then each body's velocity is kicked by its acceleration and its position drifted with the velocity it has just received. Keeping the force pass read-only means no body ever sees a partner that has already moved within the same step. The delta may be negative, which runs the same update backwards in time; semi-implicit Euler is not exactly reversible, so a forward step followed by a backward step only approximately restores the starting state. When state logging is enabled the before and after state of every body is printed as it is updated.

"""


def _report_state(tag: str, body: Body) -> None:
	print(f"[step] Velocity {tag}: {body.mass} {body.velocity}")
	print(f"[step] Position {tag}: {body.mass} {body.position}")


def step(bodies: List[Body], delta_time: float, *, G: float = G, log_states: bool = False) -> None:
	dt = float(delta_time)

	forces = net_forces(bodies, G)

	for body, force in zip(bodies, forces):
		acceleration = force * (1.0 / body.mass)
		if log_states:
			_report_state("before", body)
		body.velocity = body.velocity + acceleration * dt
		body.position = body.position + body.velocity * dt
		if log_states:
			_report_state("after", body)
