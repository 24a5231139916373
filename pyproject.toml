[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gowire"
version = "0.1.0"
description = "Emit the Go source of dependency injectors from described types and provider calls"
requires-python = ">=3.10"
dependencies = []
keywords = ["dependency-injection", "code-generation", "go", "injector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gowire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
