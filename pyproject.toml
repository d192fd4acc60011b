[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "actorengine"
version = "0.1.0"
description = "Core of a small actor/component game engine: vector, quaternion and matrix math, frustum culling, input state, transforms, cameras and a resource cache."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "actor", "component", "quaternion", "matrix", "frustum"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["actorengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
