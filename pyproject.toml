[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multifusion"
version = "0.1.0"
description = "Keyframed vector figures and nested containers: the document model of a 2D animation editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "animation", "keyframes", "bezier", "spline", "geometry"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["multifusion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
