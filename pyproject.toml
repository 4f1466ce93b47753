[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nobuild"
version = "1.20.2"
description = "Write build scripts in plain Python: compose commands, run them, and rebuild only what changed."
requires-python = ">=3.10"
dependencies = []
keywords = ["build", "build-system", "compiler", "commands", "subprocess", "make"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nobuild = "nobuild.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["nobuild"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
