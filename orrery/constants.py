from __future__ import annotations

import os
from typing import Final, Tuple

"""
This module defines the physical, time-control and presentation constants shared across the engine. G is the SI gravitational constant used by the force model. BASE_FRAME_SCALE amplifies the nominal per-frame time increment and can be overridden through the ORRERY_BASE_FRAME_SCALE environment variable; DEFAULT_SPEED and SPEED_PRESETS define the speed multiplier the time controller starts with and the values it can be set to. ZOOM_STEP, PIXELS_PER_METER and STAR_MASS_THRESHOLD are presentation values used only by the view layer and carry no physical meaning.


"""




def _parse_positive(name: str, default: float) -> float:
	env_val = os.getenv(name, "")
	if env_val.strip() != "":
		try:
			val = float(env_val)
		except ValueError:
			print(f"[warning] ignoring non-numeric {name}={env_val!r}")
			return default
		if val > 0.0:
			return val
		print(f"[warning] ignoring non-positive {name}={env_val!r}")
	return default


G: Final[float] = 6.67430e-11

BASE_FRAME_SCALE: Final[float] = _parse_positive("ORRERY_BASE_FRAME_SCALE", 1000.0)
DEFAULT_SPEED: Final[float] = 1000.0
SPEED_PRESETS: Final[Tuple[float, ...]] = (1.0, 5.0, 10.0)

ZOOM_STEP: Final[float] = 1.1
PIXELS_PER_METER: Final[float] = 1.0e-10
STAR_MASS_THRESHOLD: Final[float] = 1.0e28
STAR_RADIUS: Final[float] = 10.0
PLANET_RADIUS: Final[float] = 3.0
