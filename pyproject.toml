[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xiuxian"
version = "0.1.0"
description = "Classic algorithms: sorting, graph cloning, an LRU cache and a sliding median filter"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "lru-cache",
    "graph",
    "median-filter",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xiuxian-sort = "xiuxian.sorts:main"
xiuxian-lru = "xiuxian.lru_cache:main"
xiuxian-median-filter = "xiuxian.median_filter:main"

[tool.hatch.build.targets.wheel]
packages = ["xiuxian"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
