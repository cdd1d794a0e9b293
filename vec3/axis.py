from __future__ import annotations

from enum import Enum


class Axis(Enum):
    """Selects one of the three components of a :class:`vec3.Vec3`."""

    X = 0
    Y = 1
    Z = 2
