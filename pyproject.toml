[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nys"
version = "0.1.0"
description = "A small 2D scene engine: projects hold scenes arranged in path trees, scenes hold rectangular objects drawn with OpenGL."
requires-python = ">=3.10"
keywords = ["scene", "scene-graph", "tree", "opengl", "2d", "graphics"]
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
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nys = "nys.project:main"

[tool.hatch.build.targets.wheel]
packages = ["nys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
