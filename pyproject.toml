[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carehub"
version = "0.1.0"
description = "A small interactive hospital management console: triage, admission, doctor notes and billing."
requires-python = ">=3.10"
dependencies = []
keywords = ["hospital", "triage", "billing", "patients", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carehub = "carehub.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["carehub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
