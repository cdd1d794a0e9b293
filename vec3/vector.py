"""Three-component single-precision vector value type."""
from __future__ import annotations

import operator
from numbers import Real
from typing import Callable, Iterable, Iterator, Optional

import numpy as np

from . import vector_math
from .axis import Axis
from .vector_math import COMPONENT_DTYPE, Operand, Vector


class _Constant:
    """Class attribute that hands out a fresh vector on every access."""

    def __init__(self, x: float, y: float, z: float) -> None:
        self._components = (x, y, z)

    def __get__(self, instance: Optional[Vec3], owner: type[Vec3]) -> Vec3:
        return owner(*self._components)


class Vec3:
    """A point or direction in 3-D space with float32 components.

    Arithmetic operators act component-wise. A scalar operand (any real
    number) is rounded to float32 and broadcast across all three components.
    A scalar on the left is evaluated as the same operation with the vector
    on the left, so ``2.0 * v == v * 2.0`` and likewise ``1.0 - v == v - 1.0``.

    Division by zero, overflow and NaN follow IEEE-754 and never raise.
    """

    __slots__ = ("_xyz",)

    # numpy scalars on the left defer to the reflected operators below
    __array_ufunc__ = None
    # mutable
    __hash__ = None  # type: ignore[assignment]

    ZERO = _Constant(0.0, 0.0, 0.0)
    ONE = _Constant(1.0, 1.0, 1.0)

    def __init__(self, x: float, y: float, z: float) -> None:
        self._xyz = np.array(
            (vector_math.to_scalar(x), vector_math.to_scalar(y), vector_math.to_scalar(z)),
            dtype=COMPONENT_DTYPE,
        )

    @classmethod
    def _wrap(cls, xyz: Vector) -> Vec3:
        vec = cls.__new__(cls)
        vec._xyz = xyz
        return vec

    @classmethod
    def from_float(cls, value: float) -> Vec3:
        """Vector with all three components equal to ``value``."""
        return cls._wrap(vector_math.broadcast(value))

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vec3:
        return cls._wrap(vector_math.to_vector(values))

    # -- components ---------------------------------------------------------

    @property
    def x(self) -> np.float32:
        return self._xyz[0]

    @x.setter
    def x(self, value: float) -> None:
        self._xyz[0] = vector_math.to_scalar(value)

    @property
    def y(self) -> np.float32:
        return self._xyz[1]

    @y.setter
    def y(self, value: float) -> None:
        self._xyz[1] = vector_math.to_scalar(value)

    @property
    def z(self) -> np.float32:
        return self._xyz[2]

    @z.setter
    def z(self, value: float) -> None:
        self._xyz[2] = vector_math.to_scalar(value)

    def component(self, axis: Axis) -> np.float32:
        """Component along ``axis``; ``v.component(Axis.X)`` is ``v.x``."""
        return self._xyz[axis.value]

    def set_component(self, axis: Axis, value: float) -> None:
        """Replace the component along ``axis`` in place."""
        self._xyz[axis.value] = vector_math.to_scalar(value)

    def with_component(self, axis: Axis, value: float) -> Vec3:
        """Copy of this vector with the component along ``axis`` replaced."""
        vec = self.copy()
        vec.set_component(axis, value)
        return vec

    def with_x(self, value: float) -> Vec3:
        return self.with_component(Axis.X, value)

    def with_y(self, value: float) -> Vec3:
        return self.with_component(Axis.Y, value)

    def with_z(self, value: float) -> Vec3:
        return self.with_component(Axis.Z, value)

    def copy(self) -> Vec3:
        return self._wrap(self._xyz.copy())

    def __copy__(self) -> Vec3:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Vec3:
        return self.copy()

    def to_array(self) -> Vector:
        """Independent float32 numpy array ``[x, y, z]``."""
        return self._xyz.copy()

    def __iter__(self) -> Iterator[np.float32]:
        return iter(tuple(self._xyz))

    def __len__(self) -> int:
        return 3

    def __repr__(self) -> str:
        # str() gives the shortest float32 digits; format() would widen to float64
        return f"Vec3({', '.join(str(c) for c in self._xyz)})"

    # -- geometry -----------------------------------------------------------

    def length(self) -> np.float32:
        return vector_math.length(self._xyz)

    def length_squared(self) -> np.float32:
        return vector_math.length_squared(self._xyz)

    def normalize(self) -> Vec3:
        """Unit vector in the same direction.

        The zero vector has no direction and normalizes to NaN components.
        """
        return self._wrap(vector_math.normalize(self._xyz))

    def min(self, other: Vec3) -> Vec3:
        """Component-wise minimum. A NaN component yields the other operand's."""
        return self._wrap(vector_math.component_min(self._xyz, other._xyz))

    def max(self, other: Vec3) -> Vec3:
        """Component-wise maximum. A NaN component yields the other operand's."""
        return self._wrap(vector_math.component_max(self._xyz, other._xyz))

    def dot(self, other: Vec3) -> np.float32:
        """Dot product; callable as ``a.dot(b)`` or ``Vec3.dot(a, b)``."""
        return vector_math.dot(self._xyz, other._xyz)

    def cross(self, other: Vec3) -> Vec3:
        """Right-handed cross product; callable as ``a.cross(b)`` or ``Vec3.cross(a, b)``."""
        return self._wrap(vector_math.cross(self._xyz, other._xyz))

    # -- comparison ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._xyz, other._xyz))

    def _key(self) -> tuple[float, float, float]:
        return tuple(self._xyz.tolist())

    def __lt__(self, other: Vec3) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Vec3) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Vec3) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Vec3) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self._key() >= other._key()

    # -- arithmetic ---------------------------------------------------------

    def _combine(self, op: Callable[[Operand, Operand], Operand], other: object) -> Vec3:
        if isinstance(other, Vec3):
            rhs: Operand = other._xyz
        elif isinstance(other, Real):
            rhs = vector_math.to_scalar(other)
        else:
            return NotImplemented
        return self._wrap(vector_math.componentwise(op, self._xyz, rhs))

    def _overwrite(self, result: Vec3) -> Vec3:
        if result is NotImplemented:
            return NotImplemented
        self._xyz[:] = result._xyz
        return self

    def __add__(self, other: Vec3 | float) -> Vec3:
        return self._combine(operator.add, other)

    def __sub__(self, other: Vec3 | float) -> Vec3:
        return self._combine(operator.sub, other)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        return self._combine(operator.mul, other)

    def __truediv__(self, other: Vec3 | float) -> Vec3:
        return self._combine(operator.truediv, other)

    # scalar on the left: same result as the scalar on the right

    def __radd__(self, other: float) -> Vec3:
        if not isinstance(other, Real):
            return NotImplemented
        return self.__add__(other)

    def __rsub__(self, other: float) -> Vec3:
        if not isinstance(other, Real):
            return NotImplemented
        return self.__sub__(other)

    def __rmul__(self, other: float) -> Vec3:
        if not isinstance(other, Real):
            return NotImplemented
        return self.__mul__(other)

    def __rtruediv__(self, other: float) -> Vec3:
        if not isinstance(other, Real):
            return NotImplemented
        return self.__truediv__(other)

    def __iadd__(self, other: Vec3 | float) -> Vec3:
        return self._overwrite(self.__add__(other))

    def __isub__(self, other: Vec3 | float) -> Vec3:
        return self._overwrite(self.__sub__(other))

    def __imul__(self, other: Vec3 | float) -> Vec3:
        return self._overwrite(self.__mul__(other))

    def __itruediv__(self, other: Vec3 | float) -> Vec3:
        return self._overwrite(self.__truediv__(other))

    def __neg__(self) -> Vec3:
        return self._wrap(vector_math.negate(self._xyz))

    def __pos__(self) -> Vec3:
        return self.copy()
