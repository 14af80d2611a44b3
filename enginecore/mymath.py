"""Vector and matrix helpers for 3D transforms (row-vector convention)."""

from __future__ import annotations

import math
from numbers import Real
from typing import List, Sequence, Union

from enginecore.matrix import Matrix4x4
from enginecore.vector import Vector3

Operand = Union[Vector3, Matrix4x4]


def get_pi() -> float:
    """The constant pi."""
    return math.pi


def add(a: Operand, b: Operand) -> Operand:
    """Add two vectors or two matrices."""
    if isinstance(a, Vector3) and isinstance(b, Vector3):
        return a + b
    if isinstance(a, Matrix4x4) and isinstance(b, Matrix4x4):
        return a + b
    raise TypeError(f"cannot add {type(a).__name__} and {type(b).__name__}")


def subtract(a: Operand, b: Operand) -> Operand:
    """Subtract two vectors or two matrices."""
    if isinstance(a, Vector3) and isinstance(b, Vector3):
        return a - b
    if isinstance(a, Matrix4x4) and isinstance(b, Matrix4x4):
        return a - b
    raise TypeError(f"cannot subtract {type(b).__name__} from {type(a).__name__}")


def multiply(a, b):
    """Multiply operands.

    scalar * vector scales; vector * vector is component-wise; matrix * matrix
    is the matrix product; vector * matrix applies the matrix to the vector as
    a column vector with an implicit w of 1.
    """
    if isinstance(a, Real) and isinstance(b, Vector3):
        return Vector3(a * b.x, a * b.y, a * b.z)
    if isinstance(a, Vector3) and isinstance(b, Vector3):
        return Vector3(a.x * b.x, a.y * b.y, a.z * b.z)
    if isinstance(a, Matrix4x4) and isinstance(b, Matrix4x4):
        return a * b
    if isinstance(a, Vector3) and isinstance(b, Matrix4x4):
        x, y, z = (
            row[0] * a.x + row[1] * a.y + row[2] * a.z + row[3] for row in b.m[:3]
        )
        return Vector3(x, y, z)
    raise TypeError(f"cannot multiply {type(a).__name__} and {type(b).__name__}")


def length(v: Vector3) -> float:
    """Euclidean length of a vector."""
    return math.sqrt(v.length_squared())


def distance(v1: Vector3, v2: Vector3) -> float:
    """Distance between two points."""
    return length(v2 - v1)


def normalize(v: Vector3) -> Vector3:
    """Unit vector in the direction of ``v``; a zero vector is returned unchanged."""
    size = length(v)
    if size == 0.0:
        return Vector3(v.x, v.y, v.z)
    return multiply(1.0 / size, v)


def lerp(p1: float, p2: float, t: float) -> float:
    """Linear interpolation between two numbers."""
    return p1 + (p2 - p1) * t


def vector3_lerp(p1: Vector3, p2: Vector3, t: float) -> Vector3:
    """Component-wise linear interpolation between two vectors."""
    return Vector3(lerp(p1.x, p2.x, t), lerp(p1.y, p2.y, t), lerp(p1.z, p2.z, t))


def _det3(rows: Sequence[Sequence[float]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = rows
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def _minor(rows: Sequence[Sequence[float]], skip_row: int, skip_col: int) -> List[List[float]]:
    return [
        [value for j, value in enumerate(row) if j != skip_col]
        for i, row in enumerate(rows)
        if i != skip_row
    ]


def inverse(m: Matrix4x4) -> Matrix4x4:
    """Inverse of a 4x4 matrix; raises ValueError if it is singular."""
    cofactors = [
        [(-1) ** (i + j) * _det3(_minor(m.m, i, j)) for j in range(4)]
        for i in range(4)
    ]
    det = sum(a * c for a, c in zip(m.m[0], cofactors[0]))
    if det == 0:
        raise ValueError("matrix is singular and has no inverse")
    return Matrix4x4([[c / det for c in column] for column in zip(*cofactors)])


def make_translate_matrix(translate: Vector3) -> Matrix4x4:
    """Translation matrix with the offset in the bottom row."""
    result = Matrix4x4.identity()
    result[3][0], result[3][1], result[3][2] = translate.x, translate.y, translate.z
    return result


def make_scale_matrix(scale: Vector3) -> Matrix4x4:
    """Scaling matrix."""
    result = Matrix4x4.identity()
    result[0][0], result[1][1], result[2][2] = scale.x, scale.y, scale.z
    return result


def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point as a row vector with w=1, then divide by the resulting w."""
    x, y, z, w = (
        vector.x * c0 + vector.y * c1 + vector.z * c2 + c3
        for c0, c1, c2, c3 in zip(*matrix.m)
    )
    return Vector3(x / w, y / w, z / w)


def transform_normal(v: Vector3, m: Matrix4x4) -> Vector3:
    """Transform a direction, ignoring translation."""
    x, y, z = (
        v.x * c0 + v.y * c1 + v.z * c2 for c0, c1, c2, _ in list(zip(*m.m))[:3]
    )
    return Vector3(x, y, z)


def make_rotate_x_matrix(radian: float) -> Matrix4x4:
    """Rotation about the X axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, s, 0.0],
            [0.0, -s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def make_rotate_y_matrix(radian: float) -> Matrix4x4:
    """Rotation about the Y axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        [
            [c, 0.0, -s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def make_rotate_z_matrix(radian: float) -> Matrix4x4:
    """Rotation about the Z axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        [
            [c, s, 0.0, 0.0],
            [-s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def make_rotate_matrix(rotate: Vector3) -> Matrix4x4:
    """Combined X*Y*Z rotation; the Z factor takes its angle from ``rotate.x``."""
    return make_rotate_x_matrix(rotate.x) * (
        make_rotate_y_matrix(rotate.y) * make_rotate_z_matrix(rotate.x)
    )


def make_affine_matrix(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
    """Scale, then rotate (X*Y*Z), then translate."""
    rotation = make_rotate_x_matrix(rotate.x) * (
        make_rotate_y_matrix(rotate.y) * make_rotate_z_matrix(rotate.z)
    )
    return make_scale_matrix(scale) * (rotation * make_translate_matrix(translate))


def make_viewport_matrix(
    left: float,
    top: float,
    width: float,
    height: float,
    min_depth: float,
    max_depth: float,
) -> Matrix4x4:
    """Map normalized device coordinates onto a screen rectangle."""
    return Matrix4x4(
        [
            [width / 2.0, 0.0, 0.0, 0.0],
            [0.0, -height / 2.0, 0.0, 0.0],
            [0.0, 0.0, max_depth - min_depth, 0.0],
            [left + width / 2.0, top + height / 2.0, min_depth, 1.0],
        ]
    )


def make_identity() -> Matrix4x4:
    """The identity matrix."""
    return Matrix4x4.identity()


def make_orthographic_matrix(
    left: float,
    top: float,
    right: float,
    bottom: float,
    near_clip: float,
    far_clip: float,
) -> Matrix4x4:
    """Orthographic projection onto the [-1,1]x[-1,1]x[0,1] volume."""
    return Matrix4x4(
        [
            [2.0 / (right - left), 0.0, 0.0, 0.0],
            [0.0, 2.0 / (top - bottom), 0.0, 0.0],
            [0.0, 0.0, 1.0 / (far_clip - near_clip), 0.0],
            [
                -(right + left) / (right - left),
                -(top + bottom) / (top - bottom),
                near_clip / (near_clip - far_clip),
                1.0,
            ],
        ]
    )


def make_perspective_fov_matrix(
    fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Left-handed perspective projection from a vertical field of view."""
    tan_half = math.tan(fov_y * 0.5)
    depth = far_clip - near_clip
    return Matrix4x4(
        [
            [1.0 / (aspect_ratio * tan_half), 0.0, 0.0, 0.0],
            [0.0, 1.0 / tan_half, 0.0, 0.0],
            [0.0, 0.0, far_clip / depth, 1.0],
            [0.0, 0.0, -near_clip * far_clip / depth, 0.0],
        ]
    )