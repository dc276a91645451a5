"""
This module defines Vector3, the three-component real vector used for every position,
velocity and force in the engine.

Vector3 is a small value type: components are fixed at construction, every operation
returns a new instance, and equality is exact component-wise comparison with no
tolerance. The module-level functions add, subtract, scale, magnitude and normalize
mirror the methods for callers that prefer a functional form. normalize returns the zero
vector for a zero-length input instead of dividing by zero. Conversion helpers move values
to and from numpy arrays for the diagnostics and snapshot layers.
"""

from __future__ import annotations
import math
import numbers
from typing import Iterator
import numpy as np




class Vector3:
	__slots__ = ("_x", "_y", "_z")

	def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
		self._x = float(x)
		self._y = float(y)
		self._z = float(z)

	@property
	def x(self) -> float:
		return self._x

	@property
	def y(self) -> float:
		return self._y

	@property
	def z(self) -> float:
		return self._z

	@classmethod
	def zero(cls) -> "Vector3":
		return cls(0.0, 0.0, 0.0)

	@classmethod
	def from_array(cls, arr) -> "Vector3":
		a = np.asarray(arr, dtype=float).ravel()
		if a.size != 3:
			raise ValueError(f"Vector3 needs exactly 3 components, got {a.size}")
		return cls(a[0], a[1], a[2])

	def to_array(self) -> np.ndarray:
		return np.array([self._x, self._y, self._z], dtype=np.float64)

	def add(self, other: "Vector3") -> "Vector3":
		return Vector3(self._x + other._x, self._y + other._y, self._z + other._z)

	def subtract(self, other: "Vector3") -> "Vector3":
		return Vector3(self._x - other._x, self._y - other._y, self._z - other._z)

	def scale(self, k: float) -> "Vector3":
		return Vector3(self._x * k, self._y * k, self._z * k)

	def magnitude(self) -> float:
		return math.sqrt(self._x * self._x + self._y * self._y + self._z * self._z)

	def normalize(self) -> "Vector3":
		mag = self.magnitude()
		if mag > 0.0:
			return self.scale(1.0 / mag)
		return Vector3.zero()

	def __add__(self, other: "Vector3") -> "Vector3":
		if not isinstance(other, Vector3):
			return NotImplemented
		return self.add(other)

	def __sub__(self, other: "Vector3") -> "Vector3":
		if not isinstance(other, Vector3):
			return NotImplemented
		return self.subtract(other)

	def __mul__(self, k: float) -> "Vector3":
		if not isinstance(k, numbers.Real):
			return NotImplemented
		return self.scale(float(k))

	__rmul__ = __mul__

	def __neg__(self) -> "Vector3":
		return Vector3(-self._x, -self._y, -self._z)

	def __iter__(self) -> Iterator[float]:
		yield self._x
		yield self._y
		yield self._z

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Vector3):
			return NotImplemented
		return self._x == other._x and self._y == other._y and self._z == other._z

	def __hash__(self) -> int:
		return hash((self._x, self._y, self._z))

	def __repr__(self) -> str:
		return f"Vector3(x={self._x}, y={self._y}, z={self._z})"


def add(a: Vector3, b: Vector3) -> Vector3:
	return a.add(b)


def subtract(a: Vector3, b: Vector3) -> Vector3:
	return a.subtract(b)


def scale(v: Vector3, k: float) -> Vector3:
	return v.scale(k)


def magnitude(v: Vector3) -> float:
	return v.magnitude()


def normalize(v: Vector3) -> Vector3:
	return v.normalize()


__all__ = ["Vector3", "add", "subtract", "scale", "magnitude", "normalize"]
