[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordlabs"
version = "0.1.0"
description = "Small text and sorting exercises: word interleaving, merged word ordering and classic sort algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "sorting", "words", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordlabs-interleave = "wordlabs.interleave:main"
wordlabs-merge-words = "wordlabs.merge_words:main"

[tool.hatch.build.targets.wheel]
packages = ["wordlabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
