"""Vertex data split into blocks, and builders that fill them from mesh attributes."""

from __future__ import annotations

import itertools
import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

import numpy as np

from .algorithm import iter_slices
from .mesh import CylinderMeshBuilder, InstanceCopyBuilder, SphereMeshBuilder
from .mesh_attrs import CylinderMeshAttribute, SphereMeshAttribute
from .vecmath import (
    Rgba8,
    Vec3,
    identity_matrix,
    rotation_matrix,
    scale_matrix,
    translation_matrix,
)

__all__ = [
    "BlockLayout",
    "VertexBlocks",
    "build_shape_color_texture",
    "build_mesh_vertices",
    "build_sphere_positions",
    "build_sphere_normals",
    "build_sphere_texcoords",
    "build_sphere_transform_instances",
    "build_sphere_texcoord_instances",
    "build_cylinder_positions",
    "build_cylinder_normals",
    "build_cylinder_texcoords",
    "build_cylinder_transform_instances",
    "build_cylinder_texcoord_instances",
]

_MAX_CHUNK_BYTES = 1024 * 1024 * 128
# position (3 floats) + normal (3 floats) + texcoord (2 floats), 4 bytes each
_BYTES_PER_VERTEX = 12 + 12 + 8
_Y_AXIS = Vec3(0, 1, 0)


class BlockLayout:
    """How instances are split into blocks of at most ``instances_per_block``.

    The last block holds ``remain_instances``; ``size`` is the block count.
    """

    def __init__(self, verts_per_instance: int, total_instances: int, max_instances_per_block: int) -> None:
        if verts_per_instance < 0 or total_instances < 0 or max_instances_per_block < 0:
            raise ValueError("layout sizes must not be negative")
        self.verts_per_instance = verts_per_instance
        self.total_instances = total_instances
        self.instances_per_block = min(max_instances_per_block, total_instances)

        per_block = self.instances_per_block
        self.size = total_instances // per_block if per_block else 0
        self.remain_instances = total_instances % per_block if per_block else 0
        if self.remain_instances == 0:
            self.remain_instances = per_block
        else:
            self.size += 1

    def block_instances(self) -> list[int]:
        """Number of instances in each block."""
        if self.size == 0:
            return []
        return [self.instances_per_block] * (self.size - 1) + [self.remain_instances]

    def same_props(self, other: BlockLayout) -> bool:
        return (
            self.size == other.size
            and self.remain_instances == other.remain_instances
            and self.instances_per_block == other.instances_per_block
            and self.verts_per_instance == other.verts_per_instance
        )


class VertexBlocks(BlockLayout):
    """Vertex storage laid out in blocks; iterating yields every vertex in order."""

    def __init__(self, verts_per_instance: int, total_instances: int, max_instances_per_block: int) -> None:
        super().__init__(verts_per_instance, total_instances, max_instances_per_block)
        self.blocks: list[list[Any]] = [
            [None] * (count * verts_per_instance) for count in self.block_instances()
        ]

    def __iter__(self) -> Iterator[Any]:
        return itertools.chain.from_iterable(self.blocks)

    def write(self, offset: int, count: int, vertices: Sequence[Any]) -> None:
        """Store the vertices of ``count`` instances starting at instance ``offset``.

        ``vertices`` must hold exactly ``count * verts_per_instance`` items.
        """
        if offset < 0 or count < 0:
            raise ValueError("offset and count must not be negative")
        if offset + count > self.total_instances or (count and not self.instances_per_block):
            raise IndexError("write goes past the last instance")
        per_instance = self.verts_per_instance
        if len(vertices) != count * per_instance:
            raise ValueError(
                f"expected {count * per_instance} vertices, got {len(vertices)}"
            )

        per_block = self.instances_per_block
        data_offset = 0
        while count > 0:
            block, index = divmod(offset, per_block)
            fill = min(count, per_block - index)
            self.blocks[block][index * per_instance:(index + fill) * per_instance] = vertices[
                data_offset * per_instance:(data_offset + fill) * per_instance
            ]
            count -= fill
            offset += fill
            data_offset += fill


def build_shape_color_texture(shape_attrs: Iterable[Any]) -> list[Rgba8]:
    """Colours of the shapes, padded with transparent black to a square count."""
    colors = [attr.color for attr in shape_attrs]
    tex_size = math.ceil(math.sqrt(len(colors)))
    colors.extend([Rgba8(0, 0, 0, 0)] * (tex_size * tex_size - len(colors)))
    return colors


def build_mesh_vertices(
    builder: Any, shape_attrs: Iterable[Any], build_fn: Callable[[Any], Iterable[Any]]
) -> VertexBlocks:
    """Fill vertex blocks with ``build_fn(attr)`` for every shape attribute.

    ``builder.vertices_size()`` gives the vertices per instance; chunks are
    sized so that one chunk of vertex data stays under 128 MiB.
    """
    shape_attrs = list(shape_attrs)
    verts_per_instance = builder.vertices_size()
    bytes_per_instance = _BYTES_PER_VERTEX * verts_per_instance
    max_instances_per_chunk = _MAX_CHUNK_BYTES // bytes_per_instance if bytes_per_instance else 0
    instances_per_chunk = min(len(shape_attrs), max_instances_per_chunk)

    blocks = VertexBlocks(verts_per_instance, len(shape_attrs), max_instances_per_chunk)
    for chunk_index, chunk in enumerate(iter_slices(shape_attrs, instances_per_chunk)):
        vertices = [vertex for attr in chunk for vertex in build_fn(attr)]
        blocks.write(chunk_index * instances_per_chunk, len(chunk), vertices)
    return blocks


def _sphere_transform(attr: SphereMeshAttribute) -> np.ndarray:
    sphere = attr.sphere
    return scale_matrix(sphere.radius) @ translation_matrix(sphere.center)


def _align_y_axis(direction: Vec3, length: float) -> np.ndarray:
    """Rotation taking the +y axis onto ``direction``."""
    if length == 0:
        return identity_matrix()
    axis = _Y_AXIS.cross(direction)
    if axis.magnitude() == 0:
        return identity_matrix() if direction.y > 0 else rotation_matrix(Vec3(1, 0, 0), math.pi)
    cos_angle = max(-1.0, min(1.0, direction.dot(_Y_AXIS) / length))
    return rotation_matrix(axis, math.acos(cos_angle))


def _cylinder_transform(attr: CylinderMeshAttribute) -> np.ndarray:
    cylinder = attr.cylinder
    half = (cylinder.top - cylinder.bottom) / 2
    length = half.magnitude()
    position = cylinder.bottom + half
    return (
        scale_matrix(cylinder.radius, length, cylinder.radius)
        @ _align_y_axis(half, length)
        @ translation_matrix(position)
    )


def build_sphere_positions(builder: SphereMeshBuilder, sphere_attrs: Iterable[SphereMeshAttribute]) -> VertexBlocks:
    return build_mesh_vertices(builder, sphere_attrs, lambda attr: builder.positions(attr.sphere))


def build_sphere_normals(builder: SphereMeshBuilder, sphere_attrs: Iterable[SphereMeshAttribute]) -> VertexBlocks:
    return build_mesh_vertices(builder, sphere_attrs, lambda _attr: builder.normals())


def build_sphere_texcoords(builder: SphereMeshBuilder, sphere_attrs: Iterable[SphereMeshAttribute]) -> VertexBlocks:
    return build_mesh_vertices(builder, sphere_attrs, lambda attr: builder.fill(attr.texcoord))


def build_sphere_transform_instances(
    builder: InstanceCopyBuilder, sphere_attrs: Iterable[SphereMeshAttribute]
) -> VertexBlocks:
    return build_mesh_vertices(builder, sphere_attrs, lambda attr: builder.build(_sphere_transform(attr)))


def build_sphere_texcoord_instances(
    builder: InstanceCopyBuilder, sphere_attrs: Iterable[SphereMeshAttribute]
) -> VertexBlocks:
    return build_mesh_vertices(builder, sphere_attrs, lambda attr: builder.build(attr.texcoord))


def build_cylinder_positions(
    builder: CylinderMeshBuilder, cylinder_attrs: Iterable[CylinderMeshAttribute]
) -> VertexBlocks:
    return build_mesh_vertices(builder, cylinder_attrs, lambda attr: builder.positions(attr.cylinder))


def build_cylinder_normals(
    builder: CylinderMeshBuilder, cylinder_attrs: Iterable[CylinderMeshAttribute]
) -> VertexBlocks:
    return build_mesh_vertices(builder, cylinder_attrs, lambda attr: builder.normals(attr.cylinder))


def build_cylinder_texcoords(
    builder: CylinderMeshBuilder, cylinder_attrs: Iterable[CylinderMeshAttribute]
) -> VertexBlocks:
    return build_mesh_vertices(
        builder, cylinder_attrs, lambda attr: builder.fill(attr.cylinder, attr.texcoord)
    )


def build_cylinder_transform_instances(
    builder: InstanceCopyBuilder, cylinder_attrs: Iterable[CylinderMeshAttribute]
) -> VertexBlocks:
    return build_mesh_vertices(builder, cylinder_attrs, lambda attr: builder.build(_cylinder_transform(attr)))


def build_cylinder_texcoord_instances(
    builder: InstanceCopyBuilder, cylinder_attrs: Iterable[CylinderMeshAttribute]
) -> VertexBlocks:
    return build_mesh_vertices(builder, cylinder_attrs, lambda attr: builder.build(attr.texcoord))