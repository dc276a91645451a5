"""
This initialization file serves as the main entry point for the orrery gravity engine,
exposing the public API through a single namespace.

It re-exports the vector type and its functional helpers, the Body class, the force model
(gravitational_force, net_forces), the semi-implicit Euler step, the time controller
(TimeState, Direction), the view state, control intents, configuration, initial condition
generation, the frame driver (Simulation, advance, WorldSnapshot), diagnostics and the
trajectory recorder, so callers can import any of them directly from the package root.
"""

from .vec3 import Vector3, add, subtract, scale, magnitude, normalize
from .constants import G
from .sim_config import SimConfig
from .body import Body
from .forces import gravitational_force, net_forces
from .integrator import step
from .time_control import Direction, TimeState
from .view_state import ViewState
from .controls import ControlIntent, apply_intent
from .simulation_validator import SimulationValidator
from .initial_conditions import InitialConditionGenerator, bodies_from_arrays
from .simulation import Simulation, WorldSnapshot, advance
from .diagnostics import Diagnostics
from .trajectory import TrajectoryRecorder


__all__ = [
    "Vector3",
    "add",
    "subtract",
    "scale",
    "magnitude",
    "normalize",
    "G",
    "SimConfig",
    "Body",
    "gravitational_force",
    "net_forces",
    "step",
    "Direction",
    "TimeState",
    "ViewState",
    "ControlIntent",
    "apply_intent",
    "SimulationValidator",
    "InitialConditionGenerator",
    "bodies_from_arrays",
    "Simulation",
    "WorldSnapshot",
    "advance",
    "Diagnostics",
    "TrajectoryRecorder",
]
