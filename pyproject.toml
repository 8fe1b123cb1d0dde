[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshview"
version = "0.1.0"
description = "A small software 3D renderer that spins a Wavefront OBJ mesh in a pixel window"
requires-python = ">=3.10"
keywords = ["3d", "renderer", "obj", "rasterizer", "pixel", "painter-algorithm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
meshview = "meshview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["meshview"]

[tool.pytest.ini_options]
addopts = "-ra"
