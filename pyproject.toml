[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gdisketch"
version = "0.1.0"
description = "A small sketching workspace for lines, circles and rotated ellipses on a Cartesian grid"
requires-python = ">=3.10"
dependencies = []
keywords = ["drawing", "geometry", "ellipse", "sketch", "shapes", "grid", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gdisketch = "gdisketch.app:main"
gdisketch-rays = "gdisketch.rays:main"

[tool.hatch.build.targets.wheel]
packages = ["gdisketch"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
