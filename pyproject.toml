[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remotesupport"
version = "0.1.0"
description = "Wire protocol framing, work-order rules, validators and ticket storage for a remote technical support system"
requires-python = ">=3.10"
dependencies = []
keywords = ["remote-support", "work-order", "ticket", "protocol", "framing", "validation"]
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
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["remotesupport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
