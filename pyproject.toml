[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginecore"
version = "0.1.0"
description = "Core pieces of a small real-time 3D engine: vector and matrix math, billboard particles, scene management and input state."
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "math", "matrix", "particles", "scene", "game-engine"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enginecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
