[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xyphra"
version = "0.1.0"
description = "Immediate-mode 2D draw-list geometry and shadow texture generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["draw list", "tessellation", "2d graphics", "vertex buffer", "shadows", "texture"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xyphra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
