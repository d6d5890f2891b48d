[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zbjobs"
version = "0.1.0"
description = "Fluent command for completing workflow engine jobs with JSON variables"
requires-python = ">=3.10"
dependencies = []
keywords = ["workflow", "jobs", "bpmn", "gateway", "json", "variables"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["zbjobs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
