"""Three-component float32 vector type for geometry, physics and graphics code."""

from .axis import Axis
from .vector import Vec3
from .vector_math import COMPONENT_DTYPE

__all__ = [
    "Axis",
    "COMPONENT_DTYPE",
    "Vec3",
]
