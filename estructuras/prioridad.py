"""A linked list kept in descending order of priority."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .registro import EstructuraVaciaError

__all__ = ["ListaPrioridad", "main"]


@dataclass(slots=True, eq=False)
class _Nodo:
    dato: Any
    prioridad: int
    siguiente: _Nodo | None = None


class ListaPrioridad:
    """List whose head always holds the element of highest priority.

    Elements of equal priority keep their order of insertion.
    """

    def __init__(self) -> None:
        self._cabeza: _Nodo | None = None
        self._longitud = 0

    def _nodos(self) -> Iterator[_Nodo]:
        nodo = self._cabeza
        while nodo is not None:
            yield nodo
            nodo = nodo.siguiente

    def insertar(self, dato: Any, prioridad: int) -> None:
        """Insert ``dato`` after every element of priority not lower."""
        nuevo = _Nodo(dato, prioridad)
        if self._cabeza is None or self._cabeza.prioridad < prioridad:
            nuevo.siguiente = self._cabeza
            self._cabeza = nuevo
        else:
            actual = self._cabeza
            while (
                actual.siguiente is not None
                and actual.siguiente.prioridad >= prioridad
            ):
                actual = actual.siguiente
            nuevo.siguiente = actual.siguiente
            actual.siguiente = nuevo
        self._longitud += 1

    def eliminar(self) -> tuple[Any, int]:
        """Remove and return the ``(dato, prioridad)`` of highest priority."""
        if self._cabeza is None:
            raise EstructuraVaciaError("La lista está vacía")
        nodo = self._cabeza
        self._cabeza = nodo.siguiente
        self._longitud -= 1
        return nodo.dato, nodo.prioridad

    def __len__(self) -> int:
        return self._longitud

    def __iter__(self) -> Iterator[tuple[Any, int]]:
        return ((nodo.dato, nodo.prioridad) for nodo in self._nodos())

    def __str__(self) -> str:
        if self._cabeza is None:
            return "La lista está vacía"
        return "\n".join(
            f"Dato: {dato}, Prioridad: {prioridad}" for dato, prioridad in self
        )


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration of the priority list."""
    lista = ListaPrioridad()
    lista.insertar(10, 2)
    lista.insertar(20, 1)
    lista.insertar(30, 3)

    print("Lista de prioridad:")
    print(lista)

    try:
        lista.eliminar()
    except EstructuraVaciaError as error:
        print(error)

    print("\nLista de prioridad después de eliminar el nodo de mayor prioridad:")
    print(lista)
    return 0