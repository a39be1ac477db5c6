"""A camera framing the molecule, with orthographic or perspective projection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .vecmath import Vec3, frustum_matrix, orthographic_matrix, translation_matrix

__all__ = ["Camera"]

_ZOOM_STEP = 1.1
_ZOOM_MAX = 200 * 1.1
_ZOOM_MIN = 1 / 1.1 / 200


@dataclass
class Camera:
    """Camera looking down -z at a volume of half-height ``top``.

    ``projection_mode`` True selects perspective, False orthographic.
    """

    field_of_view: float = math.pi / 4
    top: float = 0.0
    zfar: float = 0.0
    znear: float = 0.0
    zoom: float = 1.0
    aspect_ratio: float = 1.0
    position: Vec3 = field(default_factory=Vec3)
    projection_mode: bool = False

    def resize(self, width: float, height: float) -> None:
        """Set the aspect ratio from a width and height."""
        self.aspect_ratio = float(width) / height

    def orthogonal_proj_matrix(self) -> np.ndarray:
        near, far = self.znear, self.zfar
        top = math.tan(self.field_of_view / 2) * ((far - near) / 2 + near) * self.zoom
        right = self.aspect_ratio * top
        return orthographic_matrix(-right, right, -top, top, near, far)

    def perspective_proj_matrix(self) -> np.ndarray:
        near, far = self.znear, self.zfar
        top = math.tan(self.field_of_view / 2) * near * self.zoom
        right = self.aspect_ratio * top
        return frustum_matrix(-right, right, -top, top, near, far)

    def projection_matrix(self) -> np.ndarray:
        if self.projection_mode:
            return self.perspective_proj_matrix()
        return self.orthogonal_proj_matrix()

    def reset_zoom(self) -> None:
        self.zoom = 1.0

    def zoom_in(self) -> None:
        self.zoom = min(self.zoom * _ZOOM_STEP, _ZOOM_MAX)

    def zoom_out(self) -> None:
        self.zoom = max(self.zoom / _ZOOM_STEP, _ZOOM_MIN)

    def view_matrix(self) -> np.ndarray:
        return translation_matrix(self.position)

    def update_view_matrix(self) -> None:
        """Place the camera so the volume of half-height ``top`` fills the view."""
        focus = self.top / math.tan(self.field_of_view / 2)
        if self.aspect_ratio < 1:
            focus /= self.aspect_ratio
        self.znear = focus - self.top
        self.zfar = focus + self.top
        self.position = Vec3(0, 0, -focus)