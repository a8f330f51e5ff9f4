[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "releaseratchet"
version = "0.4.0"
description = "Conventional-commit parsing, semantic version bumping and version-file updating for release tooling"
requires-python = ">=3.10"
keywords = ["semver", "conventional-commits", "release", "versioning", "git"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "semver>=3",
    "tomlkit>=0.12",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[tool.hatch.build.targets.wheel]
packages = ["releaseratchet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
