[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastchess"
version = "0.1.0"
description = "Building blocks for a chess engine tournament manager: CRC-32 checksums, logging, thread pools, object pools and engine process bookkeeping."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "tournament", "crc32", "threadpool", "logging"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fastchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
