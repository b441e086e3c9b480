[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dirsnap"
version = "0.1.0"
description = "Record directory tree snapshots, compare saved versions and screen suspect files"
requires-python = ">=3.10"
dependencies = []
keywords = ["directory", "snapshot", "filesystem", "listing", "compare"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dirsnap = "dirsnap.project:main"
dirsnap-lab = "dirsnap.labtool:main"

[tool.hatch.build.targets.wheel]
packages = ["dirsnap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
