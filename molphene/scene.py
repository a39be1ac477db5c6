"""The scene: lighting, fog, material and the model transform of the molecule."""

from __future__ import annotations

from typing import Union

import numpy as np

from .lighting import DirectionalLight, Fog, Material, PointLight, SpotLight
from .molecule import Molecule
from .shapes import BoundingSphere
from .vecmath import Rgba8, Vec3, identity_matrix, rotation_matrix, translation_matrix

__all__ = ["Scene"]

LightSource = Union[DirectionalLight, PointLight, SpotLight]

_X_AXIS = Vec3(1, 0, 0)
_Y_AXIS = Vec3(0, 1, 0)
_Z_AXIS = Vec3(0, 0, 1)


class Scene:
    """Holds what is shared by every drawn representation of the molecule."""

    def __init__(self) -> None:
        self.light_source: LightSource = DirectionalLight()
        self.fog = Fog()
        self.material = Material()
        self.bounding_sphere = BoundingSphere()
        self._model_matrix = identity_matrix()

    @property
    def model_matrix(self) -> np.ndarray:
        return self._model_matrix.copy()

    def setup_graphics(self) -> bool:
        self.material.diffuse_color = Rgba8(0xFF, 0xFF, 0xFF)
        self.light_source = DirectionalLight()
        return True

    def reset_mesh(self, molecule: Molecule) -> None:
        """Fit the bounding sphere to the atoms and centre the model on it."""
        self.bounding_sphere.reset()
        self.bounding_sphere.expand_all(atom.position for atom in molecule.atoms)
        self._model_matrix = translation_matrix(-self.bounding_sphere.center)

    def rotate(self, x: float, y: float, z: float) -> None:
        """Rotate the model about the x, y and z axes in turn (radians)."""
        for axis, angle in ((_X_AXIS, x), (_Y_AXIS, y), (_Z_AXIS, z)):
            self._model_matrix = self._model_matrix @ rotation_matrix(axis, angle)