"""Per-instance mesh attributes derived from atoms and bonds."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from .atom import Atom, AtomElement, AtomRadiusKind
from .colors import ColorManager
from .shapes import Cylinder, Sphere
from .vecmath import Rgba8, Vec2

__all__ = [
    "SphereMeshAttribute",
    "CylinderMeshAttribute",
    "AtomSphereOptions",
    "BondCylinderOptions",
    "atoms_to_sphere_attrs",
    "bonds_to_cylinder_attrs",
]

_NO_COLOR = Rgba8(0, 0, 0, 0)


@dataclass
class SphereMeshAttribute:
    """Colour, index, colour-texture coordinate and sphere of one atom."""

    color: Rgba8 = _NO_COLOR
    index: int = 0
    texcoord: Vec2 = Vec2()
    sphere: Sphere = field(default_factory=Sphere)


@dataclass
class CylinderMeshAttribute:
    """Colour, index, colour-texture coordinate and cylinder of one half-bond."""

    color: Rgba8 = _NO_COLOR
    index: int = 0
    texcoord: Vec2 = Vec2()
    cylinder: Cylinder = field(default_factory=Cylinder)


@dataclass(frozen=True)
class AtomSphereOptions:
    radius_type: AtomRadiusKind = AtomRadiusKind.VAN_DER_WAALS
    radius_size: float = 1.0
    radius_scale: float = 1.0


@dataclass(frozen=True)
class BondCylinderOptions:
    """``is_first`` selects the half of the bond next to its first atom."""

    is_first: bool = True
    radius_size: float = 1.0


def _texture_size(count: int) -> int:
    return math.ceil(math.sqrt(count))


def _texcoord(index: int, tex_size: int) -> Vec2:
    return Vec2(float(index % tex_size), float(math.floor(index / tex_size))) / tex_size


def _atom_radius(element: AtomElement, options: AtomSphereOptions) -> float:
    if options.radius_type is AtomRadiusKind.VAN_DER_WAALS:
        radius = element.rvdw * options.radius_scale
    elif options.radius_type is AtomRadiusKind.COVALENT:
        radius = element.rcov
    else:
        radius = options.radius_size
    return radius * options.radius_scale


def atoms_to_sphere_attrs(
    atoms: Iterable[Atom], options: AtomSphereOptions | None = None
) -> list[SphereMeshAttribute]:
    """One sphere attribute per atom, in the given order.

    An atom whose element has no colour raises KeyError.
    """
    options = options or AtomSphereOptions()
    atoms = list(atoms)
    colors = ColorManager()
    tex_size = _texture_size(len(atoms))

    attrs = []
    for index, atom in enumerate(atoms):
        element = atom.element()
        attrs.append(
            SphereMeshAttribute(
                color=colors.element_color(element.symbol),
                index=index,
                texcoord=_texcoord(index, tex_size),
                sphere=Sphere(_atom_radius(element, options), atom.position),
            )
        )
    return attrs


def bonds_to_cylinder_attrs(
    bond_atoms: Iterable[tuple[Atom, Atom]], options: BondCylinderOptions | None = None
) -> list[CylinderMeshAttribute]:
    """One half-bond cylinder per atom pair, in the given order.

    The first half runs from the first atom to the bond midpoint and takes the
    first atom's colour; the second half runs from the midpoint to the second
    atom. An atom whose element has no colour raises KeyError.
    """
    options = options or BondCylinderOptions()
    bond_atoms = list(bond_atoms)
    colors = ColorManager()
    tex_size = _texture_size(len(bond_atoms))

    attrs = []
    for index, (atom1, atom2) in enumerate(bond_atoms):
        color1 = colors.element_color(atom1.element().symbol)
        color2 = colors.element_color(atom2.element().symbol)
        pos1, pos2 = atom1.position, atom2.position
        midpoint = (pos1 + pos2) * 0.5

        if options.is_first:
            cylinder = Cylinder(options.radius_size, top=pos1, bottom=midpoint)
            color = color1
        else:
            cylinder = Cylinder(options.radius_size, top=midpoint, bottom=pos2)
            color = color2

        attrs.append(
            CylinderMeshAttribute(
                color=color,
                index=index,
                texcoord=_texcoord(index, tex_size),
                cylinder=cylinder,
            )
        )
    return attrs