"""Single-precision vector kernels backing :class:`vec3.Vec3`."""
from __future__ import annotations

import math
from typing import Callable, Iterable, Union

import numpy as np

COMPONENT_DTYPE = np.float32

Vector = np.ndarray
Operand = Union[Vector, np.float32]


def to_vector(value: Iterable[float] | Vector) -> Vector:
    """Convert any 3-element iterable to a float32 numpy vector."""
    with np.errstate(all="ignore"):
        vec = np.array(list(value), dtype=COMPONENT_DTYPE)
    if vec.shape != (3,):
        raise ValueError(f"Expected exactly 3 components, got shape {vec.shape}")
    return vec


def to_scalar(value: float) -> np.float32:
    """Round a real number to float32; values out of range become +/-inf."""
    try:
        value = float(value)
    except OverflowError:
        # ints too large for a double
        value = math.inf if value > 0 else -math.inf
    with np.errstate(all="ignore"):
        return COMPONENT_DTYPE(value)


def broadcast(value: float) -> Vector:
    return np.full(3, to_scalar(value), dtype=COMPONENT_DTYPE)


def componentwise(op: Callable[[Operand, Operand], Operand], lhs: Vector, rhs: Operand) -> Vector:
    """Apply a binary scalar operator to each component of ``lhs``.

    ``rhs`` is either another vector or a float32 scalar broadcast across all
    three components. Divide-by-zero, overflow and NaN follow IEEE-754.
    """
    with np.errstate(all="ignore"):
        return np.asarray(op(lhs, rhs), dtype=COMPONENT_DTYPE)


def negate(vec: Vector) -> Vector:
    return np.negative(vec)


def length_squared(vec: Vector) -> np.float32:
    x, y, z = vec
    with np.errstate(all="ignore"):
        return x * x + y * y + z * z


def length(vec: Vector) -> np.float32:
    with np.errstate(all="ignore"):
        return np.sqrt(length_squared(vec))


def normalize(vec: Vector) -> Vector:
    # a zero vector gives 0/0 = NaN in every component
    return componentwise(np.divide, vec, length(vec))


def dot(a: Vector, b: Vector) -> np.float32:
    with np.errstate(all="ignore"):
        return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vector, b: Vector) -> Vector:
    """Right-handed cross product."""
    ax, ay, az = a
    bx, by, bz = b
    with np.errstate(all="ignore"):
        return np.array(
            (
                ay * bz - az * by,
                az * bx - ax * bz,
                ax * by - ay * bx,
            ),
            dtype=COMPONENT_DTYPE,
        )


def component_min(a: Vector, b: Vector) -> Vector:
    """Component-wise minimum; a NaN component loses to a number."""
    return np.fmin(a, b)


def component_max(a: Vector, b: Vector) -> Vector:
    """Component-wise maximum; a NaN component loses to a number."""
    return np.fmax(a, b)
