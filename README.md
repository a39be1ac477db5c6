# molphene

A small molecule-viewing model in pure Python. It reads molecules in
ChemDoodle JSON, turns atoms and bonds into sphere and cylinder vertex
data for space-filling or ball-and-stick display, and keeps the scene,
camera, lights and pointer/keyboard state that an interactive viewer
drives.

The only runtime dependency is numpy.

## What it does not do

There is no window, no graphics context and no drawing. The package
produces vertex data (positions, normals, texture coordinates and
per-instance 4x4 transforms, grouped into blocks) plus a per-shape colour
list padded to a square texture, and projection, view and model matrices.
Handing these to a graphics layer is up to you. The command line only
loads a file; it does not display anything.

## Command line

```
molphene molecule.json
```

sets up a 640x480 application, tries to open the file and prints
`openfile success!` or `openfile failure!`. A file that opens but is not
valid ChemDoodle JSON raises an error.

## Reading a molecule

```python
from molphene.chemdoodle import parse_chemdoodle_json

molecule = parse_chemdoodle_json(
    '{"mol": {"a": [{"l": "O", "x": 0, "y": 0, "z": 0},'
    '               {"l": "H", "x": 0.96, "y": 0, "z": 0}],'
    '         "b": [{"b": 0, "e": 1}]}}'
)
for first, second in molecule.bond_atom_pairs():
    print(first.element().symbol, second.element().symbol)
```

- Atoms are read from the `"a"` array and bonds from `"b"`, either at the
  top level or inside a `"mol"` object.
- An atom without `"l"` is carbon; missing `"x"`, `"y"`, `"z"` are 0.
- A bond needs both `"b"` and `"e"` (atom indices); malformed atoms or
  bonds raise `ValueError`. Empty text gives an empty `Molecule`.
- `parse_chemdoodle_stream` reads a whole open text stream instead.
- `Molecule.bond_atom_pairs()` raises `IndexError` for a bond that names
  a missing atom.

`Atom.element()` looks the symbol up with `molphene.atom.lookup_element`,
which expects upper-case keys such as `"O"` or `"CL"`; a symbol it does
not recognise gives hydrogen.

## Geometry

- `molphene.vecmath`: `Vec2`, `Vec3`, `Rgba8`, and 4x4 matrix helpers
  (`identity_matrix`, `translation_matrix`, `scale_matrix`,
  `rotation_matrix`, `orthographic_matrix`, `frustum_matrix`). Matrices
  use the row-vector convention, so `A @ B` applies `A` first.
- `molphene.shapes`: `Sphere`, `Cylinder` and `BoundingSphere`, which
  grows to enclose every point passed to `expand` or `expand_all`.
- `molphene.mesh`: `SphereMeshBuilder`, `CylinderMeshBuilder` and
  `InstanceCopyBuilder`, generating triangle-strip vertices.

```python
from molphene.shapes import BoundingSphere

bounds = BoundingSphere()
bounds.expand_all(atom.position for atom in molecule.atoms)
print(bounds.center, bounds.radius)
```

## Representations

`molphene.mesh_attrs` turns atoms into `SphereMeshAttribute`s and bonded
atom pairs into half-bond `CylinderMeshAttribute`s, coloured per element
by `molphene.colors.ColorManager`. `molphene.buffers` fills `VertexBlocks`
from them. `molphene.representation` combines these:

```python
from molphene.representation import MoleculeDisplay, build_representation

pairs = molecule.bond_atom_pairs()
rep = build_representation(
    MoleculeDisplay.BALL_AND_STICK, molecule.atoms, molecule.atoms, pairs
)
positions = list(rep.atom_sphere_buffers.buffer_positions)
```

`MoleculeDisplay` has `SPACEFILL`, `BALL_AND_STICK`, `SPACEFILL_INSTANCE`
and `BALL_AND_STICK_INSTANCE`; the instanced forms hold one unit mesh and
one transform per shape.

## Driving a viewer

`molphene.application.Application` ties the pieces together:

```python
from molphene.application import Application

app = Application()
app.setup(640, 480)
with open("molecule.json", encoding="utf-8") as handle:
    app.open_pdb_data(handle.read())

app.key_press_event(ord("h"), 0)        # ball-and-stick, instanced
app.mouse_press_event(0, 0, 10, 10)
app.mouse_move_event(30, 10)            # rotate the scene one degree per pixel
app.mouse_release_event(0, 0, 30, 10)
app.mouse_scroll_event(0, 1)            # zoom in; zero or negative zooms out
app.framebuffer_size_change_event(800, 600)

projection = app.camera.projection_matrix()
model_view = app.scene.model_matrix @ app.camera.view_matrix()
```

Keys: `p`/`o` switch perspective and orthographic projection; `h`, `j`,
`k`, `l` choose instanced ball-and-stick, instanced space-fill,
space-fill and ball-and-stick; Esc (27) sets `app.should_close`.
`change_representation` takes a `MoleculeDisplay` value as an integer
and ignores unknown ones. The built representation is in
`app.representations`.

Lights, fog and material live in `molphene.lighting` (`DirectionalLight`,
`PointLight`, `SpotLight`, `Fog`, `FogType`, `Material`) and are held by
`molphene.scene.Scene`.