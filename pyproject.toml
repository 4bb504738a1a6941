[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rubro_negro"
version = "0.1.0"
description = "Left-leaning red-black tree, name-ordered state collection, and Brazilian CEP/CPF/date helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["red-black tree", "data structures", "cep", "cpf", "brazil"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rubro_negro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
