import numpy as np
import pytest

from molphene.buffers import (
    BlockLayout,
    VertexBlocks,
    build_cylinder_normals,
    build_cylinder_positions,
    build_cylinder_texcoord_instances,
    build_cylinder_texcoords,
    build_cylinder_transform_instances,
    build_mesh_vertices,
    build_shape_color_texture,
    build_sphere_normals,
    build_sphere_positions,
    build_sphere_texcoord_instances,
    build_sphere_texcoords,
    build_sphere_transform_instances,
)
from molphene.mesh import CylinderMeshBuilder, InstanceCopyBuilder, SphereMeshBuilder
from molphene.mesh_attrs import CylinderMeshAttribute, SphereMeshAttribute
from molphene.shapes import Cylinder, Sphere
from molphene.vecmath import Rgba8, Vec2, Vec3


@pytest.mark.parametrize("total,maximum", [(10, 4), (8, 4), (3, 7), (1, 1), (13, 5)])
def test_layout_invariants(total, maximum):
    layout = BlockLayout(3, total, maximum)
    counts = layout.block_instances()
    assert sum(counts) == total
    assert len(counts) == layout.size
    assert all(0 < count <= layout.instances_per_block for count in counts)
    assert counts[-1] == layout.remain_instances


def test_even_split_pinned():
    layout = BlockLayout(1, 8, 4)
    assert layout.block_instances() == [4, 4]
    assert layout.remain_instances == layout.instances_per_block


def test_empty_layout():
    layout = BlockLayout(5, 0, 100)
    assert layout.size == 0
    assert layout.block_instances() == []


def test_same_props():
    assert BlockLayout(2, 10, 4).same_props(BlockLayout(2, 10, 4))
    assert not BlockLayout(2, 10, 4).same_props(BlockLayout(3, 10, 4))
    assert not BlockLayout(2, 10, 4).same_props(BlockLayout(2, 9, 4))


def test_negative_layout_raises():
    with pytest.raises(ValueError):
        BlockLayout(1, -1, 4)


def test_write_round_trip_across_blocks():
    blocks = VertexBlocks(2, 5, 2)
    blocks.write(0, 5, list(range(10)))
    assert list(blocks) == list(range(10))
    assert [len(block) for block in blocks.blocks] == [4, 4, 2]


def test_partial_write_spanning_blocks():
    blocks = VertexBlocks(1, 5, 2)
    blocks.write(0, 5, ["a"] * 5)
    blocks.write(1, 2, ["x", "y"])
    assert list(blocks) == ["a", "x", "y", "a", "a"]


def test_write_errors():
    blocks = VertexBlocks(2, 3, 2)
    with pytest.raises(IndexError):
        blocks.write(2, 2, [0] * 4)
    with pytest.raises(ValueError):
        blocks.write(0, 1, [0] * 3)


def test_color_texture_is_padded_square():
    attrs = [SphereMeshAttribute(color=Rgba8(1, 2, 3)) for _ in range(3)]
    colors = build_shape_color_texture(attrs)
    assert len(colors) == 4
    assert colors[:3] == [attr.color for attr in attrs]
    assert colors[3] == Rgba8(0, 0, 0, 0)
    assert build_shape_color_texture([]) == []


def _sphere_attrs():
    return [
        SphereMeshAttribute(texcoord=Vec2(0, 0), sphere=Sphere(1.5, Vec3(1, 2, 3))),
        SphereMeshAttribute(index=1, texcoord=Vec2(0.5, 0), sphere=Sphere(0.5, Vec3(-1, 0, 2))),
    ]


def test_sphere_positions_normals_texcoords():
    builder = SphereMeshBuilder()
    attrs = _sphere_attrs()
    positions = build_sphere_positions(builder, attrs)
    normals = build_sphere_normals(builder, attrs)
    texcoords = build_sphere_texcoords(builder, attrs)
    assert positions.verts_per_instance == builder.vertices_size()
    assert list(positions) == [v for attr in attrs for v in builder.positions(attr.sphere)]
    assert list(normals) == list(builder.normals()) * len(attrs)
    assert list(texcoords) == [attr.texcoord for attr in attrs for _ in range(builder.vertices_size())]
    assert positions.same_props(normals) and normals.same_props(texcoords)


def test_sphere_instances():
    builder = InstanceCopyBuilder()
    attrs = _sphere_attrs()
    transforms = list(build_sphere_transform_instances(builder, attrs))
    texcoords = list(build_sphere_texcoord_instances(builder, attrs))
    assert texcoords == [attr.texcoord for attr in attrs]
    for matrix, attr in zip(transforms, attrs):
        center = list(attr.sphere.center)
        assert np.allclose((np.array([0, 0, 0, 1.0]) @ matrix)[:3], center)
        edge = (np.array([1, 0, 0, 1.0]) @ matrix)[:3]
        assert np.linalg.norm(edge - center) == pytest.approx(attr.sphere.radius)


def _cylinder_attrs():
    return [
        CylinderMeshAttribute(cylinder=Cylinder(0.3, top=Vec3(1, 2, 3), bottom=Vec3(0, 0, 0))),
        CylinderMeshAttribute(index=1, texcoord=Vec2(0.5, 0), cylinder=Cylinder(0.2, top=Vec3(0, 5, 0), bottom=Vec3(0, 1, 0))),
        CylinderMeshAttribute(index=2, cylinder=Cylinder(0.2, top=Vec3(0, -3, 1), bottom=Vec3(0, 2, 1))),
    ]


def test_cylinder_positions_normals_texcoords():
    builder = CylinderMeshBuilder()
    attrs = _cylinder_attrs()
    positions = build_cylinder_positions(builder, attrs)
    normals = build_cylinder_normals(builder, attrs)
    texcoords = build_cylinder_texcoords(builder, attrs)
    assert list(positions) == [v for attr in attrs for v in builder.positions(attr.cylinder)]
    assert list(normals) == [v for attr in attrs for v in builder.normals(attr.cylinder)]
    assert list(texcoords) == [attr.texcoord for attr in attrs for _ in range(builder.vertices_size())]


@pytest.mark.parametrize("attr", _cylinder_attrs())
def test_cylinder_transform_maps_unit_cylinder(attr):
    (matrix,) = build_cylinder_transform_instances(InstanceCopyBuilder(), [attr])
    top = (np.array([0, 1, 0, 1.0]) @ matrix)[:3]
    bottom = (np.array([0, -1, 0, 1.0]) @ matrix)[:3]
    assert np.allclose(top, list(attr.cylinder.top))
    assert np.allclose(bottom, list(attr.cylinder.bottom))


def test_cylinder_texcoord_instances():
    attrs = _cylinder_attrs()
    result = build_cylinder_texcoord_instances(InstanceCopyBuilder(), attrs)
    assert list(result) == [attr.texcoord for attr in attrs]
    assert result.verts_per_instance == 1


def test_build_fn_with_wrong_vertex_count_raises():
    with pytest.raises(ValueError):
        build_mesh_vertices(InstanceCopyBuilder(), [1, 2], lambda attr: [attr, attr])