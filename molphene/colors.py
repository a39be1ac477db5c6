"""Per-element display colours."""

from __future__ import annotations

from .vecmath import Rgba8

__all__ = ["ColorManager"]

_DEEP_PINK = Rgba8(0xFF, 0x14, 0x93)
_GRAY = Rgba8(0x80, 0x80, 0x90)
_BROWN = Rgba8(0xA5, 0x2A, 0x2A)
_ORANGE = Rgba8(0xFF, 0xA5, 0x00)
_GOLDENROD = Rgba8(0xDA, 0xA5, 0x20)
_GREEN = Rgba8(0x00, 0xFF, 0x00)

_DISTINCT_COLORS = {
    "H": Rgba8(0xFF, 0xFF, 0xFF),
    "He": Rgba8(0xFF, 0xC0, 0xCB),
    "Li": Rgba8(0xB2, 0x22, 0x22),
    "B": _GREEN,
    "C": Rgba8(0xC8, 0xC8, 0xC8),
    "N": Rgba8(0x8F, 0x8F, 0xFF),
    "O": Rgba8(0xF0, 0x00, 0x00),
    "F": _GOLDENROD,
    "Na": Rgba8(0x00, 0x00, 0xFF),
    "Mg": Rgba8(0x22, 0x8B, 0x22),
    "Al": _GRAY,
    "Si": _GOLDENROD,
    "P": _ORANGE,
    "S": Rgba8(0xFF, 0xC8, 0x32),
    "Cl": _GREEN,
    "Ca": _GRAY,
    "Ti": _GRAY,
    "Cr": _GRAY,
    "Mn": _GRAY,
    "Fe": _ORANGE,
    "Ni": _BROWN,
    "Cu": _BROWN,
    "Zn": _BROWN,
    "Br": _BROWN,
    "Ag": _GRAY,
    "I": Rgba8(0xA0, 0x20, 0xF0),
    "Ba": _ORANGE,
    "Au": _GOLDENROD,
}

_DEEP_PINK_SYMBOLS = (
    "Be Ne Ar K Sc V Co Ga Ge As Se Kr Rb Sr Y Zr Nb Mo Tc Ru Rh Pd "
    "Cd In Sn Sb Te Xe Cs La Ce Pr Nd Pm Sm Eu Gd Tb Dy Ho Er Tm Yb Lu "
    "Hf Ta W Re Os Ir Pt Hg Tl Pb Bi Po At Rn Fr Ra Ac Th Pa U Np Pu Am "
    "Cm Bk Cf Es Fm Md No Lr Rf Db Sg Bh Hs Mt"
).split()

_ELEMENT_COLORS = {
    **{symbol: _DEEP_PINK for symbol in _DEEP_PINK_SYMBOLS},
    **_DISTINCT_COLORS,
}


class ColorManager:
    """Looks up the display colour of an element by its symbol."""

    def __init__(self) -> None:
        self._colors = dict(_ELEMENT_COLORS)

    def element_color(self, symbol: str) -> Rgba8:
        """Colour for a case-sensitive element symbol such as ``"He"``.

        Raises KeyError for a symbol that has no colour.
        """
        try:
            return self._colors[symbol]
        except KeyError:
            raise KeyError(f"no colour for element symbol {symbol!r}") from None