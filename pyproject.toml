[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparklog"
version = "0.1.0"
description = "Pattern placeholder registries, bracket scanning and environment-style level filters for logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "log", "pattern", "placeholder", "level"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sparklog"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
