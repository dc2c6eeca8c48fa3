[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ztnaconfig"
version = "0.1.0"
description = "Attribute schemas, value validators and a users API client for zero-trust network access configuration"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["ztna", "zero-trust", "configuration", "validation", "schema"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ztnaconfig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
