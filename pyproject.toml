[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubrender"
version = "0.1.0"
description = "Scene configuration, XPM texture loading and player movement for a grid raycaster"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycaster", "xpm", "texture", "scene", "game"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubrender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
