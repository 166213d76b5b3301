[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "g15render"
version = "1.3.0"
description = "Monochrome 160x43 LCD canvas and bitmap font rendering for G15-style keyboard displays"
requires-python = ">=3.10"
dependencies = []
keywords = ["lcd", "g15", "bitmap", "font", "canvas", "rendering"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["g15render"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
