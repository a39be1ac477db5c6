"""The viewer application state and its input handling, without a window."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from dataclasses import dataclass

from .camera import Camera
from .chemdoodle import parse_chemdoodle_json
from .molecule import Molecule
from .representation import MoleculeDisplay, Representation, build_representation
from .scene import Scene

__all__ = ["ClickState", "Viewport", "Application", "main"]

_KEY_DISPLAYS = {
    ord("H"): MoleculeDisplay.BALL_AND_STICK_INSTANCE,
    ord("J"): MoleculeDisplay.SPACEFILL_INSTANCE,
    ord("K"): MoleculeDisplay.SPACEFILL,
    ord("L"): MoleculeDisplay.BALL_AND_STICK,
}
_ESCAPE = 27


@dataclass
class ClickState:
    """Whether the pointer button is held, and where it was last seen."""

    is_down: bool = False
    last_x: int = 0
    last_y: int = 0


@dataclass
class Viewport:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class Application:
    """Molecule, scene, camera and the current representation, driven by input events."""

    def __init__(self) -> None:
        self.click_state = ClickState()
        self.scene = Scene()
        self.camera = Camera()
        self.viewport = Viewport()
        self.molecule = Molecule()
        self.representations: list[Representation] = []
        self.display = MoleculeDisplay.SPACEFILL
        self.should_close = False

    def _resize(self, width: int, height: int) -> None:
        self.viewport.width = width
        self.viewport.height = height
        self.camera.resize(width, height)
        self.camera.update_view_matrix()

    def setup(self, width: int, height: int) -> None:
        self.scene.setup_graphics()
        self._resize(width, height)
        self.scene.reset_mesh(self.molecule)
        self.display = MoleculeDisplay.SPACEFILL_INSTANCE
        self.reset_representation()

    def open_pdb_data(self, text: str) -> None:
        """Load a ChemDoodle JSON molecule and frame it."""
        self.molecule = parse_chemdoodle_json(text)
        self.scene.reset_mesh(self.molecule)
        self.reset_representation()
        self.camera.top = self.scene.bounding_sphere.radius + 2
        self.camera.update_view_matrix()

    def change_representation(self, representation_type: int) -> None:
        """Switch by numeric display value; unknown values are ignored."""
        try:
            display = MoleculeDisplay(representation_type)
        except ValueError:
            return
        self.representation(display)

    def representation(self, value: MoleculeDisplay) -> None:
        if self.display == value:
            return
        self.display = value
        self.reset_representation()

    def reset_representation(self) -> None:
        """Rebuild the current representation from the molecule.

        A bond naming a missing atom raises IndexError.
        """
        mol = self.molecule
        bond_atoms = mol.bond_atom_pairs()
        bonded = sorted({index for bond in mol.bonds for index in (bond.atom1, bond.atom2)})
        atoms_in_bond = [mol.atoms[index] for index in bonded]
        self.representations = [
            build_representation(self.display, list(mol.atoms), atoms_in_bond, bond_atoms)
        ]

    def key_press_event(self, charcode: int, mods: int) -> None:
        code = charcode % 256
        if code == _ESCAPE:
            self.should_close = True
            return
        key = chr(code).upper()
        if key == "P":
            self.camera.projection_mode = True
        elif key == "O":
            self.camera.projection_mode = False
        elif ord(key) in _KEY_DISPLAYS:
            self.representation(_KEY_DISPLAYS[ord(key)])

    def mouse_press_event(self, button: int, mods: int, pos_x: int, pos_y: int) -> None:
        self.click_state = ClickState(True, pos_x, pos_y)

    def mouse_release_event(self, button: int, mods: int, pos_x: int, pos_y: int) -> None:
        self.click_state = ClickState(False, pos_x, pos_y)

    def mouse_move_event(self, pos_x: int, pos_y: int) -> None:
        """While dragging, rotate the model one degree per pixel moved."""
        state = self.click_state
        if not state.is_down:
            return
        delta_x = float(state.last_x) - pos_x
        delta_y = float(state.last_y) - pos_y
        state.last_x = pos_x
        state.last_y = pos_y
        self.scene.rotate(math.pi * delta_y / 180, math.pi * delta_x / 180, 0)

    def mouse_scroll_event(self, offset_x: int, offset_y: int) -> None:
        if offset_y > 0:
            self.camera.zoom_in()
        else:
            self.camera.zoom_out()

    def framebuffer_size_change_event(self, width: int, height: int) -> None:
        self._resize(width, height)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="molphene", description="Load a ChemDoodle JSON molecule.")
    parser.add_argument("file", nargs="?", help="ChemDoodle JSON file to open")
    args = parser.parse_args(argv)

    app = Application()
    app.setup(640, 480)

    if args.file is not None:
        try:
            with open(args.file, encoding="utf-8") as handle:
                text = handle.read()
        except OSError:
            print("openfile failure!")
        else:
            print("openfile success!")
            app.open_pdb_data(text)
    return 0