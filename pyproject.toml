[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshedit"
version = "0.1.0"
description = "Mesh editing core: primitives, camera picking, selection state and undoable edit commands"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["mesh", "3d", "modeling", "geometry", "undo", "camera", "picking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["meshedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
