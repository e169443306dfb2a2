[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortedblocks"
version = "0.1.0"
description = "Sorted arrays and block-split sorted lists searched by binary search, with a timing command"
requires-python = ">=3.10"
keywords = ["binary search", "sorted list", "sorted array", "benchmark"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
sortedblocks-bench = "sortedblocks.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["sortedblocks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
