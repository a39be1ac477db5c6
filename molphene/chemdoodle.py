"""Reader for ChemDoodle JSON molecule documents."""

from __future__ import annotations

import json
from typing import Any, TextIO

from .atom import Atom
from .molecule import Bond, Molecule
from .vecmath import Vec3

__all__ = ["parse_chemdoodle_json", "parse_chemdoodle_stream"]


def _find(document: Any, key: str, kind: type) -> Any:
    if not isinstance(document, dict):
        return None
    value = document.get(key)
    return value if isinstance(value, kind) else None


def _require_object(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a JSON object")
    return value


def _number(value: Any, key: str) -> float:
    if not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


def _atom_from_json(json_atom: Any) -> Atom:
    obj = _require_object(json_atom, "atom")
    symbol = obj.get("l", "C")
    if not isinstance(symbol, str):
        raise ValueError("field 'l' must be a string")
    x, y, z = (_number(obj.get(axis, 0), axis) for axis in ("x", "y", "z"))
    return Atom(symbol, "", 0, Vec3(x, y, z))


def _bond_from_json(json_bond: Any) -> Bond:
    obj = _require_object(json_bond, "bond")
    try:
        begin, end = obj["b"], obj["e"]
    except KeyError as exc:
        raise ValueError(f"bond is missing field {exc.args[0]!r}") from None
    return Bond(int(_number(begin, "b")), int(_number(end, "e")))


def parse_chemdoodle_json(text: str) -> Molecule:
    """Build a molecule from ChemDoodle JSON text.

    Empty text gives an empty molecule; malformed JSON or malformed atoms and
    bonds raise ValueError.
    """
    mol = Molecule()
    if not text:
        return mol

    document = json.loads(text)

    inner = _find(document, "mol", dict)
    if inner is not None:
        document = inner

    for json_atom in _find(document, "a", list) or ():
        mol.add_atom(_atom_from_json(json_atom))

    for json_bond in _find(document, "b", list) or ():
        mol.add_bond(_bond_from_json(json_bond))

    return mol


def parse_chemdoodle_stream(stream: TextIO) -> Molecule:
    """Read a whole text stream and parse it as ChemDoodle JSON."""
    return parse_chemdoodle_json(stream.read())