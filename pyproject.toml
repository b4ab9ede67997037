[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termgui"
version = "0.1.0"
description = "Client library for building native Android interfaces from Termux through the Termux:GUI plugin"
requires-python = ">=3.10"
keywords = ["termux", "android", "gui", "widgets", "ui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: Android",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
termgui-demo = "termgui.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["termgui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
