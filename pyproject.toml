[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtscene"
version = "0.1.0"
description = "Validator for .rt ray-tracing scene files, with XPM image decoding and X11 colour names"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "scene", "validation", "rt", "xpm", "x11 colors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rtscene = "rtscene.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rtscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
