import math

import pytest

from molphene.mesh import CylinderMeshBuilder, InstanceCopyBuilder, SphereMeshBuilder
from molphene.shapes import Cylinder, Sphere
from molphene.vecmath import Vec2, Vec3


def test_sphere_vertices_size_uses_latitude_for_longitude():
    assert SphereMeshBuilder(10, 20).vertices_size() == 240


@pytest.mark.parametrize("lat, lon", [(10, 20), (4, 4), (7, 3)])
def test_sphere_vertex_count_matches_size(lat, lon):
    builder = SphereMeshBuilder(lat, lon)
    assert len(list(builder.normals())) == builder.vertices_size()


def test_sphere_normals_are_unit_length():
    for norm in SphereMeshBuilder(6, 6).normals():
        assert norm.magnitude() == pytest.approx(1.0)


def test_sphere_strip_repeats_first_and_last_vertex():
    normals = list(SphereMeshBuilder(5, 5).normals())
    assert normals[0] == normals[1]
    assert normals[-1] == normals[-2]


def test_sphere_positions_lie_on_surface():
    sphere = Sphere(2.5, Vec3(1, -3, 4))
    for pos in SphereMeshBuilder(8, 8).positions(sphere):
        assert (pos - sphere.center).magnitude() == pytest.approx(sphere.radius)


def test_sphere_fill_repeats_value():
    builder = SphereMeshBuilder(3, 3)
    value = Vec2(0.25, 0.5)
    filled = list(builder.fill(value))
    assert len(filled) == builder.vertices_size()
    assert all(item == value for item in filled)


def test_sphere_rejects_zero_divisions():
    with pytest.raises(ValueError):
        SphereMeshBuilder(0, 0)


def test_cylinder_vertices_size():
    assert CylinderMeshBuilder(20).vertices_size() == 132


@pytest.mark.parametrize("bands", [3, 8, 20])
def test_cylinder_vertex_count_matches_size(bands):
    builder = CylinderMeshBuilder(bands)
    assert len(list(builder.positions(Cylinder()))) == builder.vertices_size()


def test_cylinder_cap_and_side_normals():
    cyl = Cylinder(0.3, Vec3(1, 2, 3), Vec3(-1, 0, 2))
    builder = CylinderMeshBuilder(8)
    normals = list(builder.normals(cyl))
    block = builder.vertices_size() // 3
    axis = (cyl.bottom - cyl.top).to_unit()
    for norm in normals[:block]:
        assert (norm - axis).magnitude() == pytest.approx(0.0, abs=1e-12)
    for norm in normals[block:2 * block]:
        assert norm.dot(axis) == pytest.approx(0.0, abs=1e-12)
        assert norm.magnitude() == pytest.approx(1.0)
    for norm in normals[2 * block:]:
        assert (norm + axis).magnitude() == pytest.approx(0.0, abs=1e-12)


def test_cylinder_positions_stay_within_radius_of_axis():
    cyl = Cylinder(0.4, Vec3(0, 0, 5), Vec3(2, 1, 0))
    axis = (cyl.top - cyl.bottom).to_unit()
    length = (cyl.top - cyl.bottom).magnitude()
    for pos in CylinderMeshBuilder(12).positions(cyl):
        rel = pos - cyl.bottom
        along = rel.dot(axis)
        radial = (rel - axis * along).magnitude()
        assert radial <= cyl.radius + 1e-9
        assert -1e-9 <= along <= length + 1e-9


def test_cylinder_starts_at_bottom_and_ends_at_top():
    cyl = Cylinder()
    positions = list(CylinderMeshBuilder(6).positions(cyl))
    assert positions[0] == cyl.bottom
    assert positions[1] == cyl.bottom
    assert positions[-1] == cyl.top
    assert positions[-2] == cyl.top


def test_cylinder_fill_repeats_value():
    builder = CylinderMeshBuilder(5)
    value = Vec2(0.75, 0.125)
    filled = list(builder.fill(Cylinder(), value))
    assert len(filled) == builder.vertices_size()
    assert all(item == value for item in filled)


def test_cylinder_degenerate_axis_raises():
    cyl = Cylinder(1.0, Vec3(1, 1, 1), Vec3(1, 1, 1))
    with pytest.raises(ZeroDivisionError):
        list(CylinderMeshBuilder(4).positions(cyl))


def test_instance_copy_builder_yields_value_once():
    builder = InstanceCopyBuilder()
    value = Vec3(math.pi, 0, -1)
    built = list(builder.build(value))
    assert built == [value]
    assert len(built) == builder.vertices_size()