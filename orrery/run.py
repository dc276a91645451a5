import argparse
from typing import List, Optional

import numpy as np

from .controls import ControlIntent
from .diagnostics import Diagnostics
from .sim_config import SimConfig
from .simulation import Simulation
from .trajectory import TrajectoryRecorder

"""
This module implements the headless runner. main builds the default world from SimConfig, applies the requested speed preset and direction through the same control intents the interactive layer uses, advances the frame driver for the requested number of frames, and prints a diagnostics summary: energy drift relative to the starting energy, center of mass, minimum separation and elapsed simulated time. With --csv the recorded trajectory is exported through TrajectoryRecorder.

"""


_SPEED_INTENTS = [ControlIntent.SPEED_1, ControlIntent.SPEED_2, ControlIntent.SPEED_3]


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="orrery-run", description="Run the gravity simulation without a window.")
	parser.add_argument("--frames", type=int, default=100, help="number of frames to advance")
	parser.add_argument("--seed", type=int, default=None, help="random seed for the initial world")
	parser.add_argument("--speed-preset", type=int, choices=[1, 2, 3], default=None,
						help="speed preset to select before running")
	parser.add_argument("--backward", action="store_true", help="run time backwards")
	parser.add_argument("--log-states", action="store_true", help="print body states every step")
	parser.add_argument("--csv", default=None, help="write the trajectory to this CSV file")
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)

	cfg = SimConfig(seed=args.seed, log_states=args.log_states)
	recorder = TrajectoryRecorder() if args.csv else None
	sim = Simulation.from_config(cfg, recorder=recorder)

	if args.speed_preset is not None:
		sim.control(_SPEED_INTENTS[args.speed_preset - 1])
	if args.backward:
		sim.control(ControlIntent.TIME_BACKWARD)

	diag = Diagnostics(sim.bodies, cfg=cfg)
	E0 = diag.energy()
	print(f"Bodies: {sim.n_bodies}, initial energy: {E0:.6e}")

	steps = sim.run(args.frames)

	drift = diag.energy_drift(E0)
	com_pos, com_vel = diag.center_of_mass()
	print(f"Frames: {args.frames}, steps taken: {steps}")
	print(f"Elapsed simulated time: {sim.time_state.elapsed_time:.6e}")
	print(f"Relative energy drift: {drift:.3e}")
	print(f"Center of mass: {np.array2string(com_pos, precision=4)}")
	print(f"Center of mass velocity: {np.array2string(com_vel, precision=4)}")
	print(f"Minimum separation: {diag.min_separation():.6e}")

	if recorder is not None:
		if not recorder.save_csv(args.csv):
			return 1
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
