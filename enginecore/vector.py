"""Three- and four-component float vectors."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Union


@dataclass
class Vector3:
    """A 3D vector with arithmetic operators."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: Vector3) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: Union[Vector3, float]) -> Vector3:
        """Subtract a vector component-wise, or a scalar from every component."""
        if isinstance(other, Vector3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Real):
            return Vector3(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, other: Union[Vector3, float]) -> Union[Vector3, float]:
        """Vector times vector is the dot product; vector times scalar scales."""
        if isinstance(other, Vector3):
            return self.dot(other)
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)


@dataclass
class Vector4:
    """A 4D vector, typically a colour or homogeneous position."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w