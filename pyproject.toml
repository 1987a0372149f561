[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "bookexamples"
version = "0.1.0"
description = "Small worked example programs: pig latin, statistics, a company directory, a guessing game, a line search tool, a blog workflow and a tiny threaded web server."
requires-python = ">=3.10"
dependencies = []
keywords = ["examples", "education", "grep", "pig-latin", "thread-pool", "web-server"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bookexamples = "bookexamples.cli:main"

[tool.setuptools.packages.find]
include = ["bookexamples*"]

[tool.pytest.ini_options]
addopts = "-ra"
