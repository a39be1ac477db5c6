"""Triangle-strip vertex generators for spheres and cylinders."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from typing import TypeVar

from .shapes import Cylinder, Sphere
from .vecmath import Vec3

__all__ = ["SphereMeshBuilder", "CylinderMeshBuilder", "InstanceCopyBuilder"]

T = TypeVar("T")

_UP = Vec3(0, 1, 0)


def _basis(direction: Vec3) -> tuple[Vec3, Vec3]:
    """Two unit vectors perpendicular to ``direction`` (top, right)."""
    top = direction.cross(_UP)
    if top.magnitude() == 0:
        top = Vec3(0, 0, 1)
    top = top.to_unit()
    return top, top.cross(direction)


class SphereMeshBuilder:
    """Unit-sphere triangle strip, one latitude band after another.

    Each band starts and ends with a repeated vertex so that bands can be
    joined into one strip. The number of longitude divisions follows the
    number of latitude divisions; ``longitude_divs`` is kept for reference only.
    """

    def __init__(self, latitude_divs: int = 10, longitude_divs: int = 20) -> None:
        if latitude_divs <= 0:
            raise ValueError("latitude_divs must be positive")
        self.latitude_divs = latitude_divs
        self.requested_longitude_divs = longitude_divs
        self.longitude_divs = latitude_divs

    def vertices(self, func: Callable[[Vec3], T]) -> Iterator[T]:
        """Yield ``func(normal)`` for every strip vertex."""
        direction = Vec3(0, 0, 1)
        top, right = _basis(direction)
        lat_divs = self.latitude_divs
        long_divs = self.longitude_divs

        for i in range(lat_divs):
            theta = math.pi / lat_divs * i
            sin_theta, cos_theta = math.sin(theta), math.cos(theta)
            next_theta = math.pi / lat_divs * (i + 1)
            next_sin, next_cos = math.sin(next_theta), math.cos(next_theta)

            for j in range(long_divs + 1):
                phi = math.pi * 2 * j / long_divs
                n = right * math.cos(phi) + top * math.sin(phi)

                norm = direction * cos_theta + n * sin_theta
                yield func(norm)
                if j == 0:
                    yield func(norm)

                norm = direction * next_cos + n * next_sin
                yield func(norm)
                if j == long_divs:
                    yield func(norm)

    def positions(self, sphere: Sphere) -> Iterator[Vec3]:
        return self.vertices(lambda norm: sphere.center + norm * sphere.radius)

    def normals(self) -> Iterator[Vec3]:
        return self.vertices(lambda norm: norm)

    def fill(self, value: T) -> Iterator[T]:
        """Yield ``value`` once per vertex."""
        return self.vertices(lambda _norm: value)

    def vertices_size(self) -> int:
        return self.latitude_divs * (self.longitude_divs + 1) * 2 + self.latitude_divs * 2


class CylinderMeshBuilder:
    """Capped-cylinder triangle strip: bottom cap, side, then top cap."""

    def __init__(self, bands: int = 20) -> None:
        if bands <= 0:
            raise ValueError("bands must be positive")
        self.bands = bands

    def vertices(self, cylinder: Cylinder, func: Callable[[Vec3, Vec3], T]) -> Iterator[T]:
        """Yield ``func(position, normal)`` for every strip vertex."""
        cyl_top = cylinder.top
        cyl_bottom = cylinder.bottom
        direction = (cyl_bottom - cyl_top).to_unit()
        top, right = _basis(direction)
        bands = self.bands

        def rims() -> Iterator[tuple[int, Vec3]]:
            for i in range(bands + 1):
                theta = math.pi * 2 * i / bands
                yield i, right * math.cos(theta) + top * math.sin(theta)

        sections = (
            lambda n: (cyl_bottom, direction, cyl_bottom + n * cylinder.radius, direction),
            lambda n: (cyl_bottom + n * cylinder.radius, n, cyl_top + n * cylinder.radius, n),
            lambda n: (cyl_top + n * cylinder.radius, -direction, cyl_top, -direction),
        )

        for section in sections:
            for i, n in rims():
                first_pos, first_norm, second_pos, second_norm = section(n)
                yield func(first_pos, first_norm)
                if i == 0:
                    yield func(first_pos, first_norm)
                yield func(second_pos, second_norm)
                if i == bands:
                    yield func(second_pos, second_norm)

    def positions(self, cylinder: Cylinder) -> Iterator[Vec3]:
        return self.vertices(cylinder, lambda pos, _norm: pos)

    def normals(self, cylinder: Cylinder) -> Iterator[Vec3]:
        return self.vertices(cylinder, lambda _pos, norm: norm)

    def fill(self, cylinder: Cylinder, value: T) -> Iterator[T]:
        """Yield ``value`` once per vertex."""
        return self.vertices(cylinder, lambda _pos, _norm: value)

    def vertices_size(self) -> int:
        return ((self.bands + 1) * 2 + 2) * 3


class InstanceCopyBuilder:
    """A one-vertex "mesh": each instance contributes its value once."""

    def build(self, value: T) -> Iterator[T]:
        yield value

    def vertices_size(self) -> int:
        return 1