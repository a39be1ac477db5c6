"""Molecule scene model: ChemDoodle JSON parsing, sphere and cylinder meshes, camera, lighting and viewer state."""

__version__ = "0.1.0"