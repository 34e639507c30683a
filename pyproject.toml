[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leatherman"
version = "0.1.0"
description = "A multitool of small utilities: shell quoting, netrc parsing, mozlz4 decoding, strftime translation, notes helpers and more."
requires-python = ">=3.10"
keywords = [
    "utilities",
    "shell",
    "netrc",
    "mozlz4",
    "strftime",
    "notes",
    "twilio",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "lz4",
    "beautifulsoup4",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
leatherman = "leatherman.cli:main"
proj = "leatherman.proj:main"

[tool.hatch.build.targets.wheel]
packages = ["leatherman"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
