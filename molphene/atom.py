"""Atoms and the periodic-table data attached to them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .vecmath import Vec3

__all__ = ["AtomRadiusKind", "AtomElement", "Atom", "lookup_element"]


class AtomRadiusKind(enum.Enum):
    """Which radius to use when drawing an atom."""

    VAN_DER_WAALS = enum.auto()
    COVALENT = enum.auto()
    FIXED = enum.auto()


@dataclass(frozen=True)
class AtomElement:
    """Name, symbol, atomic number and radii of a chemical element."""

    name: str
    symbol: str
    number: int
    rvdw: float
    rcov: float


_ELEMENT_ROWS = (
    ("Hydrogen", "H", 1, 1.2, 0.31),
    ("Helium", "He", 2, 1.4, 0.28),
    ("Lithium", "Li", 3, 1.82, 1.28),
    ("Beryllium", "Be", 4, 0, 0.96),
    ("Boron", "B", 5, 0, 0.84),
    ("Carbon", "C", 6, 1.7, 0.76),
    ("Nitrogen", "N", 7, 1.55, 0.71),
    ("Oxygen", "O", 8, 1.52, 0.66),
    ("Fluorine", "F", 9, 1.47, 0.57),
    ("Neon", "Ne", 10, 1.54, 0.58),
    ("Sodium", "Na", 11, 2.27, 1.66),
    ("Magnesium", "Mg", 12, 1.73, 1.41),
    ("Aluminum", "Al", 13, 0, 1.21),
    ("Silicon", "Si", 14, 2.1, 1.11),
    ("Phosphorus", "P", 15, 1.8, 1.07),
    ("Sulfur", "S", 16, 1.8, 1.05),
    ("Chlorine", "Cl", 17, 1.75, 1.02),
    ("Argon", "Ar", 18, 1.88, 1.06),
    ("Potassium", "K", 19, 2.75, 2.03),
    ("Calcium", "Ca", 20, 0, 1.76),
    ("Scandium", "Sc", 21, 0, 1.7),
    ("Titanium", "Ti", 22, 0, 1.6),
    ("Vanadium", "V", 23, 0, 1.53),
    ("Chromium", "Cr", 24, 0, 1.39),
    ("Manganese", "Mn", 25, 0, 1.39),
    ("Iron", "Fe", 26, 0, 1.32),
    ("Cobalt", "Co", 27, 0, 1.26),
    ("Nickel", "Ni", 28, 1.63, 1.24),
    ("Copper", "Cu", 29, 1.4, 1.32),
    ("Zinc", "Zn", 30, 1.39, 1.22),
    ("Gallium", "Ga", 31, 1.87, 1.22),
    ("Germanium", "Ge", 32, 0, 1.2),
    ("Arsenic", "As", 33, 1.85, 1.19),
    ("Selenium", "Se", 34, 1.9, 1.2),
    ("Bromine", "Br", 35, 1.85, 1.2),
    ("Krypton", "Kr", 36, 2.02, 1.16),
    ("Rubidium", "Rb", 37, 0, 2.2),
    ("Strontium", "Sr", 38, 0, 1.95),
    ("Yttrium", "Y", 39, 0, 1.9),
    ("Zirconium", "Zr", 40, 0, 1.75),
    ("Niobium", "Nb", 41, 0, 1.64),
    ("Molybdenum", "Mo", 42, 0, 1.54),
    ("Technetium", "Tc", 43, 0, 1.47),
    ("Ruthenium", "Ru", 44, 0, 1.46),
    ("Rhodium", "Rh", 45, 0, 1.42),
    ("Palladium", "Pd", 46, 1.63, 1.39),
    ("Silver", "Ag", 47, 1.72, 1.45),
    ("Cadmium", "Cd", 48, 1.58, 1.44),
    ("Indium", "In", 49, 1.93, 1.42),
    ("Tin", "Sn", 50, 2.17, 1.39),
    ("Antimony", "Sb", 51, 0, 1.39),
    ("Tellurium", "Te", 52, 2.06, 1.38),
    ("Iodine", "I", 53, 1.98, 1.39),
    ("Xenon", "Xe", 54, 2.16, 1.4),
    ("Cesium", "Cs", 55, 0, 2.44),
    ("Barium", "Ba", 56, 0, 2.15),
    ("Lanthanum", "La", 57, 0, 2.07),
    ("Cerium", "Ce", 58, 0, 2.04),
    ("Praseodymium", "Pr", 59, 0, 2.03),
    ("Neodymium", "Nd", 60, 0, 2.01),
    ("Promethium", "Pm", 61, 0, 1.99),
    ("Samarium", "Sm", 62, 0, 1.98),
    ("Europium", "Eu", 63, 0, 1.98),
    ("Gadolinium", "Gd", 64, 0, 1.96),
    ("Terbium", "Tb", 65, 0, 1.94),
    ("Dysprosium", "Dy", 66, 0, 1.92),
    ("Holmium", "Ho", 67, 0, 1.92),
    ("Erbium", "Er", 68, 0, 1.89),
    ("Thulium", "Tm", 69, 0, 1.9),
    ("Ytterbium", "Yb", 70, 0, 1.87),
    ("Lutetium", "Lu", 71, 0, 1.87),
    ("Hafnium", "Hf", 72, 0, 1.75),
    ("Tantalum", "Ta", 73, 0, 1.7),
    ("Tungsten", "W", 74, 0, 1.62),
    ("Rhenium", "Re", 75, 0, 1.51),
    ("Osmium", "Os", 76, 0, 1.44),
    ("Iridium", "Ir", 77, 0, 1.41),
    ("Platinum", "Pt", 78, 1.75, 1.36),
    ("Gold", "Au", 79, 1.66, 1.36),
    ("Mercury", "Hg", 80, 1.55, 1.32),
    ("Thallium", "Tl", 81, 1.96, 1.45),
    ("Lead", "Pb", 82, 2.02, 1.46),
    ("Bismuth", "Bi", 83, 0, 1.48),
    ("Polonium", "Po", 84, 0, 1.4),
    ("Astatine", "At", 85, 0, 1.5),
    ("Radon", "Rn", 86, 0, 1.5),
    ("Francium", "Fr", 87, 0, 2.6),
    ("Radium", "Ra", 88, 0, 2.21),
    ("Actinium", "Ac", 89, 0, 2.15),
    ("Thorium", "Th", 90, 0, 2.06),
    ("Protactinium", "Pa", 91, 0, 2),
    ("Uranium", "U", 92, 1.86, 1.96),
    ("Neptunium", "Np", 93, 0, 1.9),
    ("Plutonium", "Pu", 94, 0, 1.87),
    ("Americium", "Am", 95, 0, 1.8),
    ("Curium", "Cm", 96, 0, 1.69),
    ("Berkelium", "Bk", 97, 0, 0),
    ("Californium", "Cf", 98, 0, 0),
    ("Einsteinium", "Es", 99, 0, 0),
    ("Fermium", "Fm", 100, 0, 0),
    ("Mendelevium", "Md", 101, 0, 0),
    ("Nobelium", "No", 102, 0, 0),
    ("Lawrencium", "Lr", 103, 0, 0),
    ("Rutherfordium", "Rf", 104, 0, 0),
    ("Dubnium", "Db", 105, 0, 0),
    ("Seaborgium", "Sg", 106, 0, 0),
    ("Bohrium", "Bh", 107, 0, 0),
    ("Hassium", "Hs", 108, 0, 0),
    ("Meitnerium", "Mt", 109, 0, 0),
    ("Darmstadtium", "Ds", 110, 0, 0),
    ("Roentgenium", "Rg", 111, 0, 0),
    ("Copernicium", "Cn", 112, 0, 0),
    ("Ununtrium", "Uut", 113, 0, 0),
    ("Ununquadium", "Uuq", 114, 0, 0),
    ("Ununpentium", "Uup", 115, 0, 0),
    ("Ununhexium", "Uuh", 116, 0, 0),
    ("Ununseptium", "Uus", 117, 0, 0),
    ("Ununoctium", "Uuo", 118, 0, 0),
)

_ELEMENTS = tuple(AtomElement(*row) for row in _ELEMENT_ROWS)

# Lookup keys are upper-case symbols, matched exactly; argon is keyed "R".
_BY_KEY = {
    ("R" if element.symbol == "Ar" else element.symbol.upper()): element
    for element in _ELEMENTS
}

_HYDROGEN = _ELEMENTS[0]


def lookup_element(symbol: str) -> AtomElement:
    """Element for an upper-case symbol key; unknown symbols give hydrogen."""
    return _BY_KEY.get(symbol, _HYDROGEN)


@dataclass
class Atom:
    """A single atom: its element symbol, name, serial and position."""

    element_symbol: str
    name: str = ""
    serial: int = 0
    position: Vec3 = field(default_factory=Vec3)

    def element(self) -> AtomElement:
        return lookup_element(self.element_symbol)