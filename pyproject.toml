[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "futconc"
version = "7.6.3"
description = "Structured concurrency operations for asyncio: join, try_join, race, race_ok, wait_until and growable future groups"
requires-python = ">=3.11"
dependencies = []
keywords = ["async", "asyncio", "concurrency", "structured-concurrency", "futures"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["futconc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
