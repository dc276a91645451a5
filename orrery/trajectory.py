import numpy as np
import pandas as pd
from typing import Dict, List, Sequence

from .body import Body

"""
This module records body states frame by frame for offline inspection. The TrajectoryRecorder class appends one row per body per recorded frame (frame number, elapsed simulated time, body index, mass, position and velocity components), converts the collected rows into a pandas DataFrame, and exports them to CSV. It is an export path only; recorded trajectories are never loaded back into a simulation.


"""


COLUMNS = ["frame", "time", "body", "mass", "x", "y", "z", "vx", "vy", "vz"]


class TrajectoryRecorder:
	def __init__(self) -> None:
		self.rows: List[Dict[str, float]] = []

	def __len__(self) -> int:
		return len(self.rows)

	def record(self, frame: int, elapsed_time: float, bodies: Sequence[Body]) -> None:
		for i, b in enumerate(bodies):
			p = b.position
			v = b.velocity
			self.rows.append({
				"frame": int(frame),
				"time": float(elapsed_time),
				"body": i,
				"mass": b.mass,
				"x": p.x, "y": p.y, "z": p.z,
				"vx": v.x, "vy": v.y, "vz": v.z,
			})

	def to_frame(self) -> pd.DataFrame:
		return pd.DataFrame(self.rows, columns=COLUMNS)

	def positions(self, body: int) -> np.ndarray:
		df = self.to_frame()
		return df.loc[df["body"] == body, ["x", "y", "z"]].to_numpy(dtype=float)

	def save_csv(self, filename: str) -> bool:
		if not self.rows:
			print("[error] No trajectory rows to save. Record some frames first.")
			return False
		df = self.to_frame()
		df.to_csv(filename, index=False)
		print(f"Saved {len(df)} trajectory rows to {filename}")
		return True
