[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ossim"
version = "0.1.0"
description = "Console simulators of classic operating-system exercises: CPU scheduling, demand paging, banker's algorithm, disk allocation, a simple instruction computer, DFA drivers, a line editor and a toy shell"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "simulation",
    "scheduling",
    "paging",
    "banker",
    "dfa",
    "line editor",
    "shell",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
ossim-paging = "ossim.paging:main"
ossim-dfa = "ossim.dfa:main"
ossim-banker = "ossim.banker:main"
ossim-scheduling = "ossim.scheduling:main"
ossim-sic = "ossim.sic:main"
ossim-allocation = "ossim.allocation:main"
ossim-editor = "ossim.editor:main"
ossim-shell = "ossim.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["ossim"]

[tool.pytest.ini_options]
addopts = "-ra"
