[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "librarydesk"
version = "0.1.0"
description = "A terminal library management desk: books, members, borrowing, reservations and reports kept in CSV files."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "borrowing", "members", "reservations", "csv", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
librarydesk = "librarydesk.main:main"

[tool.hatch.build.targets.wheel]
packages = ["librarydesk"]

[tool.pytest.ini_options]
addopts = "-ra"
