[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terrainnoise"
version = "0.1.0"
description = "Coherent noise for procedural terrain: Perlin, value and gradient lattice noise, domain warp kernels, and a small wall-clock timer."
requires-python = ">=3.10"
dependencies = []
keywords = ["noise", "perlin", "value-noise", "procedural", "terrain", "domain-warp", "mersenne-twister"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["terrainnoise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
