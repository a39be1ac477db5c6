[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "molphene"
version = "0.1.0"
description = "Molecule scene model: ChemDoodle JSON parsing, space-filling and ball-and-stick meshes, camera, lighting and viewer input state."
requires-python = ">=3.10"
keywords = [
    "molecule",
    "chemistry",
    "chemdoodle",
    "visualization",
    "mesh",
    "spacefill",
    "ball-and-stick",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
molphene = "molphene.application:main"

[tool.hatch.build.targets.wheel]
packages = ["molphene"]

[tool.hatch.build.targets.sdist]
include = ["molphene", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
