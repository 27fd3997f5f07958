[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgbasics"
version = "0.1.0"
description = "Basic computer graphics building blocks: points, segments, polygons, Bezier curves, instances and raster images"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["graphics", "geometry", "bezier", "polygon", "image-processing", "raster"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cgbasics-image = "cgbasics.processing:main"

[tool.hatch.build.targets.wheel]
packages = ["cgbasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
