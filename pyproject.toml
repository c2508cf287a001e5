[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estructuras"
version = "0.1.0"
description = "Listas enlazadas, pilas, grafos y árboles de procesos para aprender estructuras de datos"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "estructuras de datos",
    "lista enlazada",
    "lista doble",
    "pila",
    "cola de prioridad",
    "grafo",
    "ordenamiento",
    "procesos",
    "fork",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: POSIX",
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
estructuras = "estructuras.consola:main"
estructuras-tad = "estructuras.tad:main"
estructuras-prioridad = "estructuras.prioridad:main"

[tool.hatch.build.targets.wheel]
packages = ["estructuras"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
