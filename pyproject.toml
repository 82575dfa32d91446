[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xpacklib"
version = "0.9.0"
description = "Building blocks for the xpack archive format: on-disk records, string hashes, CRC-32, RC4, zlib/zip helpers and small collections."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "archive",
    "xpack",
    "crc32",
    "rc4",
    "murmur",
    "hash",
    "zlib",
    "zip",
    "binary",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Archiving",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["xpacklib"]

[tool.hatch.build.targets.sdist]
include = [
    "xpacklib",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["xpacklib"]
