[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cofeature"
version = "0.1.0"
description = "File-backed store for point, line, polygon and annotation features with GeoJSON export"
requires-python = ">=3.10"
dependencies = []
keywords = ["gis", "features", "geojson", "vector", "annotation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cofeature"]

[tool.pytest.ini_options]
addopts = "-ra"
