"""
This module implements Newtonian gravitational force calculations between bodies.

gravitational_force returns the force exerted on one body by another using the SI
gravitational constant. Bodies at exactly the same position produce the zero vector: the
interaction is dropped rather than resolved, which avoids a division by zero at the cost
of ignoring that pair for the step. net_forces sums the pairwise forces on every body from
all the others, iterating partners in collection order so results are reproducible, and
never modifies the bodies it reads.
"""

from __future__ import annotations
from typing import List, Sequence

from .body import Body
from .constants import G
from .vec3 import Vector3



def gravitational_force(a: Body, b: Body, G: float = G) -> Vector3:
    d = a.position - b.position
    r = d.magnitude()
    if r > 0.0:
        force_magnitude = G * (a.mass * b.mass) / (r * r)
        return d.normalize() * (-force_magnitude)
    return Vector3.zero()


def net_forces(bodies: Sequence[Body], G: float = G) -> List[Vector3]:
    forces = []
    for i, body in enumerate(bodies):
        total = Vector3.zero()
        for j, other in enumerate(bodies):
            if i != j:
                total = total + gravitational_force(body, other, G)
        forces.append(total)
    return forces
