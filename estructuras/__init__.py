"""Listas enlazadas, pilas, un grafo y ejemplos de jerarquías de procesos."""

__version__ = "0.1.0"