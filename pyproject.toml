[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jumpin"
version = "0.1.0"
description = "A small jumping game with scenes, CSV stages and simple colliders, drawn with pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "jump", "pygame", "collision", "scene"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jumpin = "jumpin.game:main"

[tool.hatch.build.targets.wheel]
packages = ["jumpin"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
