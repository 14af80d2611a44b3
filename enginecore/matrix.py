"""A 4x4 float matrix stored row-major."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Iterator, List, Union


def _zero_rows() -> List[List[float]]:
    return [[0.0] * 4 for _ in range(4)]


@dataclass
class Matrix4x4:
    """A 4x4 matrix; ``m[row][column]`` addresses an element."""

    m: List[List[float]] = field(default_factory=_zero_rows)

    def __post_init__(self) -> None:
        rows = [[float(value) for value in row] for row in self.m]
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("Matrix4x4 needs exactly 4 rows of 4 values")
        self.m = rows

    @classmethod
    def zero(cls) -> Matrix4x4:
        """The all-zero matrix."""
        return cls()

    @classmethod
    def identity(cls) -> Matrix4x4:
        """The identity matrix."""
        return cls([[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)])

    def __getitem__(self, index: int) -> List[float]:
        return self.m[index]

    def __iter__(self) -> Iterator[List[float]]:
        return iter(self.m)

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self.m, other.m)]
        )

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            [[a - b for a, b in zip(ra, rb)] for ra, rb in zip(self.m, other.m)]
        )

    def __mul__(self, other: Union[Matrix4x4, float]) -> Matrix4x4:
        """Matrix product, or element-wise scaling by a number."""
        if isinstance(other, Matrix4x4):
            columns = list(zip(*other.m))
            return Matrix4x4(
                [
                    [sum(a * b for a, b in zip(row, col)) for col in columns]
                    for row in self.m
                ]
            )
        if isinstance(other, Real):
            return Matrix4x4([[value * other for value in row] for row in self.m])
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix4x4:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __imul__(self, other: Union[Matrix4x4, float]) -> Matrix4x4:
        result = self * other
        if result is NotImplemented:
            return NotImplemented
        self.m = result.m
        return self