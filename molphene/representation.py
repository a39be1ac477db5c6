"""Molecule representations (space-filling, ball-and-stick) and their vertex buffers."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from .atom import Atom, AtomElement, AtomRadiusKind
from .buffers import (
    VertexBlocks,
    build_cylinder_normals,
    build_cylinder_positions,
    build_cylinder_texcoord_instances,
    build_cylinder_texcoords,
    build_cylinder_transform_instances,
    build_shape_color_texture,
    build_sphere_normals,
    build_sphere_positions,
    build_sphere_texcoord_instances,
    build_sphere_texcoords,
    build_sphere_transform_instances,
)
from .colors import ColorManager
from .mesh import CylinderMeshBuilder, InstanceCopyBuilder, SphereMeshBuilder
from .mesh_attrs import (
    AtomSphereOptions,
    BondCylinderOptions,
    CylinderMeshAttribute,
    SphereMeshAttribute,
    atoms_to_sphere_attrs,
    bonds_to_cylinder_attrs,
)
from .vecmath import Rgba8

__all__ = [
    "MoleculeDisplay",
    "SphereBuffersBatch",
    "SphereBuffersInstanced",
    "CylinderBuffersBatch",
    "CylinderBuffersInstanced",
    "SpacefillRepresentation",
    "BallStickRepresentation",
    "build_representation",
]

_SPHERE_MESH = SphereMeshBuilder(10, 20)
_CYLINDER_MESH = CylinderMeshBuilder(20)
_COPY_BUILDER = InstanceCopyBuilder()


class MoleculeDisplay(enum.Enum):
    """The ways a molecule can be drawn."""

    SPACEFILL = 0
    BALL_AND_STICK = 1
    SPACEFILL_INSTANCE = 2
    BALL_AND_STICK_INSTANCE = 3


@dataclass
class SphereBuffersBatch:
    """Full per-vertex positions, normals and texcoords for every sphere."""

    mesh_builder: SphereMeshBuilder = field(default=_SPHERE_MESH, repr=False)
    color_texture: list[Rgba8] | None = None
    buffer_positions: VertexBlocks | None = None
    buffer_normals: VertexBlocks | None = None
    buffer_texcoords: VertexBlocks | None = None

    def build(self, sphere_attrs: Iterable[SphereMeshAttribute]) -> None:
        attrs = list(sphere_attrs)
        self.buffer_positions = build_sphere_positions(self.mesh_builder, attrs)
        self.buffer_normals = build_sphere_normals(self.mesh_builder, attrs)
        self.buffer_texcoords = build_sphere_texcoords(self.mesh_builder, attrs)
        self.color_texture = build_shape_color_texture(attrs)


@dataclass
class SphereBuffersInstanced:
    """One unit-sphere mesh plus a transform and texcoord per sphere instance."""

    mesh_builder: SphereMeshBuilder = field(default=_SPHERE_MESH, repr=False)
    copy_builder: InstanceCopyBuilder = field(default=_COPY_BUILDER, repr=False)
    color_texture: list[Rgba8] | None = None
    buffer_positions: VertexBlocks | None = None
    buffer_normals: VertexBlocks | None = None
    buffer_texcoords: VertexBlocks | None = None
    buffer_transforms: VertexBlocks | None = None

    def build(self, sphere_attrs: Iterable[SphereMeshAttribute]) -> None:
        attrs = list(sphere_attrs)
        unit = [SphereMeshAttribute()]
        self.buffer_positions = build_sphere_positions(self.mesh_builder, unit)
        self.buffer_normals = build_sphere_normals(self.mesh_builder, unit)
        self.buffer_texcoords = build_sphere_texcoord_instances(self.copy_builder, attrs)
        self.buffer_transforms = build_sphere_transform_instances(self.copy_builder, attrs)
        self.color_texture = build_shape_color_texture(attrs)


@dataclass
class CylinderBuffersBatch:
    """Full per-vertex positions, normals and texcoords for every cylinder."""

    mesh_builder: CylinderMeshBuilder = field(default=_CYLINDER_MESH, repr=False)
    color_texture: list[Rgba8] | None = None
    buffer_positions: VertexBlocks | None = None
    buffer_normals: VertexBlocks | None = None
    buffer_texcoords: VertexBlocks | None = None

    def build(self, cylinder_attrs: Iterable[CylinderMeshAttribute]) -> None:
        attrs = list(cylinder_attrs)
        self.buffer_positions = build_cylinder_positions(self.mesh_builder, attrs)
        self.buffer_normals = build_cylinder_normals(self.mesh_builder, attrs)
        self.buffer_texcoords = build_cylinder_texcoords(self.mesh_builder, attrs)
        self.color_texture = build_shape_color_texture(attrs)


@dataclass
class CylinderBuffersInstanced:
    """One unit-cylinder mesh plus a transform and texcoord per cylinder instance."""

    mesh_builder: CylinderMeshBuilder = field(default=_CYLINDER_MESH, repr=False)
    copy_builder: InstanceCopyBuilder = field(default=_COPY_BUILDER, repr=False)
    color_texture: list[Rgba8] | None = None
    buffer_positions: VertexBlocks | None = None
    buffer_normals: VertexBlocks | None = None
    buffer_texcoords: VertexBlocks | None = None
    buffer_transforms: VertexBlocks | None = None

    def build(self, cylinder_attrs: Iterable[CylinderMeshAttribute]) -> None:
        attrs = list(cylinder_attrs)
        unit = [CylinderMeshAttribute()]
        self.buffer_positions = build_cylinder_positions(self.mesh_builder, unit)
        self.buffer_normals = build_cylinder_normals(self.mesh_builder, unit)
        self.buffer_texcoords = build_cylinder_texcoord_instances(self.copy_builder, attrs)
        self.buffer_transforms = build_cylinder_transform_instances(self.copy_builder, attrs)
        self.color_texture = build_shape_color_texture(attrs)


SphereBuffers = Union[SphereBuffersBatch, SphereBuffersInstanced]
CylinderBuffers = Union[CylinderBuffersBatch, CylinderBuffersInstanced]


@dataclass
class SpacefillRepresentation:
    """Every atom drawn as a sphere."""

    radius_type: AtomRadiusKind = AtomRadiusKind.VAN_DER_WAALS
    radius_size: float = 1.0
    color_manager: ColorManager = field(default_factory=ColorManager, repr=False)
    atom_sphere_buffers: SphereBuffers = field(default_factory=SphereBuffersBatch)

    def build(self, atoms: Iterable[Atom]) -> None:
        attrs = atoms_to_sphere_attrs(
            atoms, AtomSphereOptions(self.radius_type, self.radius_size, 1.0)
        )
        self.atom_sphere_buffers.build(attrs)

    def atom_radius(self, element: AtomElement) -> float:
        if self.radius_type is AtomRadiusKind.VAN_DER_WAALS:
            return element.rvdw
        if self.radius_type is AtomRadiusKind.COVALENT:
            return element.rcov
        return self.radius_size

    def atom_color(self, atom: Atom) -> Rgba8:
        return self.color_manager.element_color(atom.element().symbol)


@dataclass
class BallStickRepresentation:
    """Bonded atoms drawn as small spheres joined by two-coloured half-bond sticks."""

    atom_radius_type: AtomRadiusKind = AtomRadiusKind.VAN_DER_WAALS
    atom_radius_size: float = 1.0
    radius_size: float = 0.275
    color_manager: ColorManager = field(default_factory=ColorManager, repr=False)
    atom_sphere_buffers: SphereBuffers = field(default_factory=SphereBuffersBatch)
    bond1_cylinder_buffers: CylinderBuffers = field(default_factory=CylinderBuffersBatch)
    bond2_cylinder_buffers: CylinderBuffers = field(default_factory=CylinderBuffersBatch)

    def build(
        self, atoms_in_bond: Iterable[Atom], bond_atoms: Iterable[tuple[Atom, Atom]]
    ) -> None:
        sphere_attrs = atoms_to_sphere_attrs(
            atoms_in_bond,
            AtomSphereOptions(self.atom_radius_type, self.atom_radius_size, 0.5),
        )
        self.atom_sphere_buffers.build(sphere_attrs)

        pairs = list(bond_atoms)
        self.bond1_cylinder_buffers.build(
            bonds_to_cylinder_attrs(pairs, BondCylinderOptions(True, self.radius_size))
        )
        self.bond2_cylinder_buffers.build(
            bonds_to_cylinder_attrs(pairs, BondCylinderOptions(False, self.radius_size))
        )

    def atom_radius(self, element: AtomElement) -> float:
        if self.atom_radius_type is AtomRadiusKind.VAN_DER_WAALS:
            return element.rvdw * self.radius_size
        if self.atom_radius_type is AtomRadiusKind.COVALENT:
            return element.rcov * self.radius_size
        return self.radius_size

    def atom_color(self, atom: Atom) -> Rgba8:
        return self.color_manager.element_color(atom.element().symbol)


Representation = Union[SpacefillRepresentation, BallStickRepresentation]


def build_representation(
    display: MoleculeDisplay,
    atoms: Iterable[Atom],
    atoms_in_bond: Iterable[Atom],
    bond_atoms: Iterable[tuple[Atom, Atom]],
) -> Representation:
    """Build the representation selected by ``display`` with its buffers filled."""
    if display is MoleculeDisplay.SPACEFILL:
        spacefill = SpacefillRepresentation(atom_sphere_buffers=SphereBuffersBatch())
        spacefill.build(atoms)
        return spacefill
    if display is MoleculeDisplay.SPACEFILL_INSTANCE:
        spacefill = SpacefillRepresentation(atom_sphere_buffers=SphereBuffersInstanced())
        spacefill.build(atoms)
        return spacefill
    if display is MoleculeDisplay.BALL_AND_STICK:
        ballstick = BallStickRepresentation(
            atom_sphere_buffers=SphereBuffersBatch(),
            bond1_cylinder_buffers=CylinderBuffersBatch(),
            bond2_cylinder_buffers=CylinderBuffersBatch(),
        )
    elif display is MoleculeDisplay.BALL_AND_STICK_INSTANCE:
        ballstick = BallStickRepresentation(
            atom_sphere_buffers=SphereBuffersInstanced(),
            bond1_cylinder_buffers=CylinderBuffersInstanced(),
            bond2_cylinder_buffers=CylinderBuffersInstanced(),
        )
    else:
        raise ValueError(f"unknown display mode: {display!r}")
    ballstick.build(atoms_in_bond, bond_atoms)
    return ballstick