[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wirecanvas"
version = "0.1.0"
description = "Anti-aliased line drawing on a grayscale canvas and simple 3D wireframe projection"
requires-python = ">=3.10"
dependencies = []
keywords = ["wireframe", "rasterization", "3d", "projection", "pgm", "canvas"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wirecanvas-clock = "wirecanvas.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["wirecanvas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
