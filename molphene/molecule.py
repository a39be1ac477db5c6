"""Molecules: a list of atoms and the bonds between them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .atom import Atom

__all__ = ["Bond", "Molecule"]


@dataclass(frozen=True)
class Bond:
    """A bond between two atoms, given by their indices in the molecule."""

    atom1: int
    atom2: int


@dataclass
class Molecule:
    """Atoms and bonds, in the order they were added."""

    atoms: list[Atom] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)

    def add_atom(self, atom: Atom) -> None:
        self.atoms.append(atom)

    def add_bond(self, bond: Bond) -> None:
        self.bonds.append(bond)

    def _atom_at(self, index: int) -> Atom:
        if not 0 <= index < len(self.atoms):
            raise IndexError(f"bond refers to missing atom index {index}")
        return self.atoms[index]

    def bond_atom_pairs(self) -> list[tuple[Atom, Atom]]:
        """The two atoms of every bond, in bond order.

        A bond that names an atom index outside the molecule raises IndexError.
        """
        return [(self._atom_at(bond.atom1), self._atom_at(bond.atom2)) for bond in self.bonds]