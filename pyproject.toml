[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "egakeru"
version = "0.1.0"
description = "Renderer-independent engine building blocks: 3D math, events, keymaps, debug line geometry, an editor gizmo and a debug console"
requires-python = ">=3.10"
dependencies = []
keywords = ["engine", "3d", "frustum", "culling", "gizmo", "events", "keymap", "debug"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["egakeru"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
