[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "photon"
version = "0.1.0"
description = "A tiny software 3D renderer that draws a perspective-projected wireframe cube in a resizable window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["3d", "rendering", "software-renderer", "wireframe", "bresenham", "perspective"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
photon = "photon.window:main"

[tool.hatch.build.targets.wheel]
packages = ["photon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
