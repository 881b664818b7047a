[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gdiframe"
version = "0.1.0"
description = "A small display-free 2D game framework: scenes, objects, colliders, animations, keyboard states and deferred events."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "framework", "collision", "animation", "scene"]
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
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gdiframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
