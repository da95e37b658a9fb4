[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sonas"
version = "0.1.0"
description = "Terminal music player core: command parsing, a local control daemon and Vim-style key bindings"
requires-python = ">=3.10"
keywords = ["music", "player", "terminal", "key-bindings", "daemon", "unix-socket"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
sonasd = "sonas.daemon:main"
sonasctl = "sonas.ctl:main"

[tool.hatch.build.targets.wheel]
packages = ["sonas"]

[tool.hatch.build.targets.sdist]
include = ["sonas", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
