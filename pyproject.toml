[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noahkit"
version = "0.1.0"
description = "Archive listing, sorting, file-association, Rythp scripting and installer helpers for the Noah archiver front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["archive", "archiver", "lzh", "zip", "file-association", "installer", "script"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
noahkit-install = "noahkit.installer:main"

[tool.hatch.build.targets.wheel]
packages = ["noahkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
