"""Undirected graphs stored as adjacency lists."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["Grafo", "VERTICES_POR_DEFECTO"]

VERTICES_POR_DEFECTO = 5


class Grafo:
    """Undirected graph over the vertices ``0 .. vertices - 1``.

    Every vertex keeps its neighbours with the most recently added first.
    Parallel edges and self-loops are allowed.
    """

    def __init__(self, vertices: int = VERTICES_POR_DEFECTO) -> None:
        if vertices < 0:
            raise ValueError("El número de vértices no puede ser negativo")
        self._lista: list[list[int]] = [[] for _ in range(vertices)]

    def _comprobar(self, vertice: int) -> None:
        if not 0 <= vertice < len(self._lista):
            raise IndexError(
                f"Vértice {vertice} fuera de rango (0-{len(self._lista) - 1})"
            )

    def agregar_arista(self, origen: int, destino: int) -> None:
        """Add the edge ``origen``-``destino`` in both directions."""
        self._comprobar(origen)
        self._comprobar(destino)
        self._lista[origen].insert(0, destino)
        self._lista[destino].insert(0, origen)

    @staticmethod
    def _quitar(vecinos: list[int], vertice: int) -> None:
        try:
            vecinos.remove(vertice)
        except ValueError:
            pass

    def eliminar_arista(self, origen: int, destino: int) -> None:
        """Remove one edge ``origen``-``destino``; do nothing if absent."""
        self._comprobar(origen)
        self._comprobar(destino)
        self._quitar(self._lista[origen], destino)
        self._quitar(self._lista[destino], origen)

    def adyacentes(self, vertice: int) -> list[int]:
        """Return the neighbours of ``vertice``, newest first."""
        self._comprobar(vertice)
        return list(self._lista[vertice])

    def __len__(self) -> int:
        return len(self._lista)

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self._lista)))

    def __str__(self) -> str:
        return "\n".join(
            f"Vértice {vertice}: " + "".join(f"{v} " for v in vecinos)
            for vertice, vecinos in enumerate(self._lista)
        )