"""Geometric shapes used to build meshes and to frame the scene."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .vecmath import Vec3

__all__ = ["Sphere", "Cylinder", "BoundingSphere"]


@dataclass
class Sphere:
    """A sphere given by radius and centre."""

    radius: float = 1.0
    center: Vec3 = field(default_factory=Vec3)


@dataclass
class Cylinder:
    """A cylinder from ``bottom`` to ``top`` with the given radius."""

    radius: float = 1.0
    top: Vec3 = field(default_factory=lambda: Vec3(0, 1, 0))
    bottom: Vec3 = field(default_factory=lambda: Vec3(0, -1, 0))

    def height(self) -> int:
        """Distance between the end caps, truncated to a whole number."""
        return int((self.top - self.bottom).magnitude())


class BoundingSphere:
    """A sphere grown incrementally to enclose every point given to it.

    An empty bounding sphere has a negative radius.
    """

    def __init__(self) -> None:
        self._sphere = Sphere(-1.0)

    @property
    def center(self) -> Vec3:
        return self._sphere.center

    @property
    def radius(self) -> float:
        return self._sphere.radius

    def expand(self, position: Vec3) -> None:
        sphere = self._sphere
        if sphere.radius < 0.0:
            sphere.center = position
            sphere.radius = 0.0
            return

        offset = position - sphere.center
        distance = offset.magnitude()
        if distance * distance > sphere.radius * sphere.radius:
            far_side = sphere.center - offset * sphere.radius / distance
            sphere.center = (far_side + position) / 2
            sphere.radius = (far_side - sphere.center).magnitude()

    def expand_all(self, positions: Iterable[Vec3]) -> None:
        for position in positions:
            self.expand(position)

    def reset(self) -> None:
        self._sphere.radius = -1.0