[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memoria"
version = "0.1.0"
description = "Paged main-memory model for a teaching operating system: frames, page tables, process scripts and physical reads and writes."
requires-python = ">=3.10"
dependencies = []
keywords = ["paging", "virtual memory", "page table", "frames", "operating systems", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["memoria"]

[tool.hatch.build.targets.sdist]
include = ["memoria", "tests", "README.md", "pyproject.toml"]

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
files = ["memoria"]
