"""Light sources, fog and surface material used when shading a scene."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from .vecmath import Rgba8, Vec3

__all__ = ["DirectionalLight", "PointLight", "SpotLight", "FogType", "Fog", "Material"]

_WHITE = Rgba8(0xFF, 0xFF, 0xFF)


@dataclass
class _Light:
    ambient_intensity: float = 0.0
    color: Rgba8 = _WHITE
    intensity: float = 1.0


@dataclass
class DirectionalLight(_Light):
    """Light arriving from one direction everywhere in the scene."""

    direction: Vec3 = Vec3(0, 0, -1)


@dataclass
class PointLight(_Light):
    """Light radiating from a location, attenuated with distance."""

    radius: float = 100.0
    attenuation: Vec3 = Vec3(1, 0, 0)
    location: Vec3 = Vec3(0, 0, 0)


@dataclass
class SpotLight(PointLight):
    """A point light restricted to a cone around ``direction``."""

    beam_width: float = math.pi / 4
    cut_off_angle: float = math.pi / 2
    direction: Vec3 = Vec3(0, 0, -1)


class FogType(enum.Enum):
    LINEAR = enum.auto()
    EXPONENTIAL = enum.auto()


@dataclass
class Fog:
    """Distance fog; a visibility range of zero disables it."""

    visibility_range: float = 0.0
    color: Rgba8 = _WHITE
    fog_type: FogType = FogType.LINEAR


@dataclass
class Material:
    """Surface properties shared by every drawn shape."""

    ambient_intensity: float = 0.2
    diffuse_color: Rgba8 = Rgba8(0xCC, 0xCC, 0xCC)
    emissive_color: Rgba8 = field(default_factory=lambda: Rgba8(0, 0, 0, 0))
    specular_color: Rgba8 = field(default_factory=lambda: Rgba8(0, 0, 0, 0))
    shininess: float = 0.2