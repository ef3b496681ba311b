[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kombatecs"
version = "0.1.0"
description = "A small entity-component-system with fighting-game components and a sprite animation demo"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["ecs", "entity-component-system", "game", "fighting", "sprites", "animation"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kombatecs-demo = "kombatecs.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["kombatecs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
