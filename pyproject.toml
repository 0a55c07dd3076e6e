[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "olimpiada"
version = "0.1.0"
description = "Solutions to introductory olympiad programming problems, with a terminal hangman game"
requires-python = ">=3.10"
dependencies = []
keywords = ["olympiad", "programming-exercises", "algorithms", "education", "hangman"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
olimpiada = "olimpiada.cli:main"
olimpiada-forca = "olimpiada.hangman:main"

[tool.setuptools.packages.find]
include = ["olimpiada*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
