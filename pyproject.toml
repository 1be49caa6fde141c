[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recite"
version = "0.1.0"
description = "Paged vocabulary notebook with a keyboard-driven word tree and JSON storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["vocabulary", "flashcards", "words", "recite", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Natural Language :: English",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["recite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
