"""Small vector, colour and 4x4 matrix helpers used throughout the viewer.

Matrices follow the row-vector convention: a point ``p`` is transformed as
``[x, y, z, 1] @ M``, so composing transforms is ``A @ B`` (apply ``A`` first).
Stored row-major, such a matrix has the memory layout OpenGL expects.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

__all__ = [
    "Vec2",
    "Vec3",
    "Rgba8",
    "identity_matrix",
    "translation_matrix",
    "scale_matrix",
    "rotation_matrix",
    "orthographic_matrix",
    "frustum_matrix",
]


@dataclass(frozen=True)
class Vec2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)


@dataclass(frozen=True)
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def to_unit(self) -> Vec3:
        """Return the vector scaled to length one; a zero vector raises."""
        length = self.magnitude()
        if length == 0:
            raise ZeroDivisionError("cannot normalise a zero-length vector")
        return self / length


@dataclass(frozen=True)
class Rgba8:
    """An 8-bit-per-channel RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0xFF

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"colour channel out of range: {channel}")

    def __iter__(self) -> Iterator[int]:
        yield from (self.r, self.g, self.b, self.a)

    def as_floats(self) -> tuple[float, float, float, float]:
        """Channels scaled to the 0..1 range."""
        return tuple(channel / 0xFF for channel in self)  # type: ignore[return-value]


def _vec3_tuple(value: Iterable[float]) -> tuple[float, float, float]:
    x, y, z = value
    return float(x), float(y), float(z)


def identity_matrix() -> np.ndarray:
    return np.identity(4)


def translation_matrix(offset: Iterable[float]) -> np.ndarray:
    matrix = np.identity(4)
    matrix[3, :3] = _vec3_tuple(offset)
    return matrix


def scale_matrix(x: float, y: float | None = None, z: float | None = None) -> np.ndarray:
    """Scale matrix; with one argument the scale is uniform."""
    y = x if y is None else y
    z = x if z is None else z
    return np.diag([float(x), float(y), float(z), 1.0])


def rotation_matrix(axis: Iterable[float], angle: float) -> np.ndarray:
    """Rotation by ``angle`` radians about ``axis``."""
    k = np.array(_vec3_tuple(axis))
    norm = np.linalg.norm(k)
    if norm == 0:
        raise ValueError("rotation axis must not be zero")
    k = k / norm
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    skew = np.array([[0.0, -k[2], k[1]], [k[2], 0.0, -k[0]], [-k[1], k[0], 0.0]])
    column_form = cos_a * np.identity(3) + sin_a * skew + (1 - cos_a) * np.outer(k, k)
    matrix = np.identity(4)
    matrix[:3, :3] = column_form.T
    return matrix


def _check_extents(left: float, right: float, bottom: float, top: float, near: float, far: float) -> None:
    if left == right or bottom == top or near == far:
        raise ValueError("projection volume must have non-zero extent")


def orthographic_matrix(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    _check_extents(left, right, bottom, top, near, far)
    column_form = np.array(
        [
            [2 / (right - left), 0, 0, -(right + left) / (right - left)],
            [0, 2 / (top - bottom), 0, -(top + bottom) / (top - bottom)],
            [0, 0, -2 / (far - near), -(far + near) / (far - near)],
            [0, 0, 0, 1],
        ],
        dtype=float,
    )
    return column_form.T


def frustum_matrix(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    _check_extents(left, right, bottom, top, near, far)
    column_form = np.array(
        [
            [2 * near / (right - left), 0, (right + left) / (right - left), 0],
            [0, 2 * near / (top - bottom), (top + bottom) / (top - bottom), 0],
            [0, 0, -(far + near) / (far - near), -2 * far * near / (far - near)],
            [0, 0, -1, 0],
        ],
        dtype=float,
    )
    return column_form.T