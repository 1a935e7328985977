[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iteradapt"
version = "0.1.0"
description = "Lazy iterator adaptors and sources: merging, peeking, permutations, tuples, zipping and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "iterators", "adaptors", "itertools", "generators", "lazy"]
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

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["iteradapt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
