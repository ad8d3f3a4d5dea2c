[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitcam"
version = "0.1.0"
description = "Camera, trackball and 3D math utilities for interactive viewers"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["camera", "quaternion", "trackball", "frustum", "projection", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["orbitcam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
