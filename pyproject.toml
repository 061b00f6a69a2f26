[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "luminoveau"
version = "0.1.0"
description = "2D game utilities: vectors, rectangles, colours, easing curves, tweening, a quadtree and a camera."
requires-python = ">=3.10"
dependencies = []
keywords = ["gamedev", "2d", "vector", "easing", "tween", "quadtree", "camera", "color"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["luminoveau"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
