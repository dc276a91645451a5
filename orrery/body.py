"""
This module defines the Body class, a point mass with position, velocity and mass.

Position and velocity are Vector3 values that the integrator replaces every step; the
mass is fixed at construction and must be a positive finite number. Two bodies compare
equal when their positions and masses match, velocity is not part of a body's identity.
Because bodies change every step they are not hashable.
"""

from __future__ import annotations
import math

from .vec3 import Vector3


class Body:
	__hash__ = None

	def __init__(self, position: Vector3, velocity: Vector3, mass: float):
		mass = float(mass)
		if not (mass > 0.0 and math.isfinite(mass)):
			print(f"[invalid] Body: mass must be a positive finite number, got {mass}")
			raise ValueError(f"body mass must be a positive finite number, got {mass}")
		self.position = position
		self.velocity = velocity
		self.mass = mass

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Body):
			return NotImplemented
		return self.position == other.position and self.mass == other.mass

	def __repr__(self) -> str:
		return f"Body(mass={self.mass}, position={self.position}, velocity={self.velocity})"
