[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oledarcade"
version = "0.1.4"
description = "Tiny arcade console (car dodger, pong, record table) on a simulated 128x64 monochrome display"
requires-python = ">=3.10"
dependencies = []
keywords = ["arcade", "game", "oled", "ssd1306", "pong", "joystick", "monochrome", "framebuffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oledarcade = "oledarcade.app:main"

[tool.hatch.build.targets.wheel]
packages = ["oledarcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
