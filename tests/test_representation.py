import math

import pytest

from molphene.atom import Atom, AtomRadiusKind
from molphene.colors import ColorManager
from molphene.mesh import SphereMeshBuilder
from molphene.representation import (
    BallStickRepresentation,
    CylinderBuffersBatch,
    CylinderBuffersInstanced,
    MoleculeDisplay,
    SpacefillRepresentation,
    SphereBuffersBatch,
    SphereBuffersInstanced,
    build_representation,
)
from molphene.mesh_attrs import atoms_to_sphere_attrs, bonds_to_cylinder_attrs
from molphene.vecmath import Vec3


def _water():
    oxygen = Atom("O", position=Vec3(0, 0, 0))
    h1 = Atom("H", position=Vec3(1, 0, 0))
    h2 = Atom("H", position=Vec3(0, 1, 0))
    return [oxygen, h1, h2], [(oxygen, h1), (oxygen, h2)]


def test_display_values_follow_source_order():
    assert MoleculeDisplay(0) is MoleculeDisplay.SPACEFILL
    assert MoleculeDisplay(1) is MoleculeDisplay.BALL_AND_STICK
    assert MoleculeDisplay(2) is MoleculeDisplay.SPACEFILL_INSTANCE
    assert MoleculeDisplay(3) is MoleculeDisplay.BALL_AND_STICK_INSTANCE


def test_sphere_batch_buffers_consistent():
    atoms, _ = _water()
    attrs = atoms_to_sphere_attrs(atoms)
    buffers = SphereBuffersBatch()
    buffers.build(attrs)
    per_instance = SphereMeshBuilder(10, 20).vertices_size()
    assert buffers.buffer_positions.total_instances == len(atoms)
    assert len(list(buffers.buffer_positions)) == len(atoms) * per_instance
    assert buffers.buffer_positions.same_props(buffers.buffer_normals)
    assert buffers.buffer_positions.same_props(buffers.buffer_texcoords)
    assert buffers.color_texture[:3] == [a.color for a in attrs]
    assert len(buffers.color_texture) == 4


def test_sphere_instanced_buffers_share_one_mesh():
    atoms, _ = _water()
    attrs = atoms_to_sphere_attrs(atoms)
    buffers = SphereBuffersInstanced()
    buffers.build(attrs)
    assert buffers.buffer_positions.total_instances == 1
    assert buffers.buffer_positions.same_props(buffers.buffer_normals)
    assert buffers.buffer_transforms.total_instances == len(atoms)
    assert buffers.buffer_transforms.same_props(buffers.buffer_texcoords)
    assert list(buffers.buffer_texcoords) == [a.texcoord for a in attrs]


def test_cylinder_instanced_buffers():
    _, bonds = _water()
    attrs = bonds_to_cylinder_attrs(bonds)
    buffers = CylinderBuffersInstanced()
    buffers.build(attrs)
    assert buffers.buffer_positions.total_instances == 1
    assert buffers.buffer_transforms.total_instances == len(bonds)
    assert len(list(buffers.buffer_transforms)) == len(bonds)


def test_cylinder_batch_texcoords_fill_each_instance():
    _, bonds = _water()
    attrs = bonds_to_cylinder_attrs(bonds)
    buffers = CylinderBuffersBatch()
    buffers.build(attrs)
    texcoords = list(buffers.buffer_texcoords)
    per_instance = buffers.buffer_texcoords.verts_per_instance
    assert texcoords[:per_instance] == [attrs[0].texcoord] * per_instance
    assert texcoords[per_instance:] == [attrs[1].texcoord] * per_instance


def test_spacefill_atom_radius_kinds():
    carbon = Atom("C").element()
    rep = SpacefillRepresentation()
    assert rep.atom_radius(carbon) == carbon.rvdw
    rep.radius_type = AtomRadiusKind.COVALENT
    assert rep.atom_radius(carbon) == carbon.rcov
    rep.radius_type = AtomRadiusKind.FIXED
    rep.radius_size = 2.5
    assert rep.atom_radius(carbon) == 2.5


def test_ballstick_atom_radius_scaled_by_radius_size():
    carbon = Atom("C").element()
    rep = BallStickRepresentation()
    assert rep.atom_radius(carbon) == pytest.approx(carbon.rvdw * rep.radius_size)
    rep.atom_radius_type = AtomRadiusKind.FIXED
    assert rep.atom_radius(carbon) == rep.radius_size


def test_atom_color_uses_element_table():
    oxygen = Atom("O")
    assert SpacefillRepresentation().atom_color(oxygen) == ColorManager().element_color("O")
    assert BallStickRepresentation().atom_color(oxygen) == ColorManager().element_color("O")


def test_spacefill_build_places_vertices_on_sphere():
    carbon = Atom("C", position=Vec3(1, 2, 3))
    rep = SpacefillRepresentation()
    rep.build([carbon])
    radius = carbon.element().rvdw
    for vertex in rep.atom_sphere_buffers.buffer_positions:
        assert (vertex - carbon.position).magnitude() == pytest.approx(radius)


def test_ballstick_half_bonds_end_at_midpoint_and_second_atom():
    atoms, bonds = _water()
    rep = BallStickRepresentation()
    rep.build(atoms, bonds)
    first = list(rep.bond1_cylinder_buffers.buffer_positions)
    second = list(rep.bond2_cylinder_buffers.buffer_positions)
    # Each strip starts at the cylinder bottom centre.
    assert first[0] == (bonds[0][0].position + bonds[0][1].position) * 0.5
    assert second[0] == bonds[0][1].position
    assert rep.bond1_cylinder_buffers.buffer_positions.total_instances == len(bonds)


def test_ballstick_spheres_shrunk():
    carbon = Atom("C", position=Vec3(0, 0, 0))
    other = Atom("C", position=Vec3(2, 0, 0))
    rep = BallStickRepresentation()
    rep.build([carbon, other], [(carbon, other)])
    spacefill = SpacefillRepresentation()
    spacefill.build([carbon])
    small = max(v.magnitude() for v in rep.atom_sphere_buffers.buffer_positions.blocks[0])
    big = max(v.magnitude() for v in spacefill.atom_sphere_buffers.buffer_positions)
    assert small < big


@pytest.mark.parametrize(
    "display, sphere_type",
    [
        (MoleculeDisplay.SPACEFILL, SphereBuffersBatch),
        (MoleculeDisplay.SPACEFILL_INSTANCE, SphereBuffersInstanced),
        (MoleculeDisplay.BALL_AND_STICK, SphereBuffersBatch),
        (MoleculeDisplay.BALL_AND_STICK_INSTANCE, SphereBuffersInstanced),
    ],
)
def test_build_representation_selects_buffers(display, sphere_type):
    atoms, bonds = _water()
    rep = build_representation(display, atoms, atoms, bonds)
    assert isinstance(rep.atom_sphere_buffers, sphere_type)
    expected_type = (
        SpacefillRepresentation
        if display in (MoleculeDisplay.SPACEFILL, MoleculeDisplay.SPACEFILL_INSTANCE)
        else BallStickRepresentation
    )
    assert isinstance(rep, expected_type)
    assert rep.atom_sphere_buffers.color_texture[: len(atoms)] == [
        rep.atom_color(a) for a in atoms
    ]


def test_empty_molecule_builds_empty_buffers():
    rep = build_representation(MoleculeDisplay.BALL_AND_STICK_INSTANCE, [], [], [])
    assert list(rep.atom_sphere_buffers.buffer_transforms) == []
    assert rep.bond1_cylinder_buffers.color_texture == []


def test_element_without_colour_raises():
    with pytest.raises(KeyError):
        SpacefillRepresentation().build([Atom("DS")])


def test_bond_of_coincident_atoms_raises():
    a = Atom("C", position=Vec3(1, 1, 1))
    b = Atom("C", position=Vec3(1, 1, 1))
    with pytest.raises(ZeroDivisionError):
        BallStickRepresentation().build([a, b], [(a, b)])


def test_sphere_vertex_count_matches_mesh():
    atoms, _ = _water()
    rep = build_representation(MoleculeDisplay.SPACEFILL, atoms, [], [])
    total = len(list(rep.atom_sphere_buffers.buffer_normals))
    assert total == len(atoms) * SphereMeshBuilder().vertices_size()
    for normal in rep.atom_sphere_buffers.buffer_normals:
        assert math.isclose(normal.magnitude(), 1.0, rel_tol=1e-9)