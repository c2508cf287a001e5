"""A minimal singly linked list abstract data type."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Lista", "main"]


@dataclass(slots=True, eq=False)
class _Nodo:
    dato: Any
    siguiente: _Nodo | None = None


class Lista:
    """Singly linked list supporting insertion at either end."""

    def __init__(self, datos: Iterable[Any] = ()) -> None:
        self._cabeza: _Nodo | None = None
        for dato in datos:
            self.insertar_final(dato)

    def _nodos(self) -> Iterator[_Nodo]:
        nodo = self._cabeza
        while nodo is not None:
            yield nodo
            nodo = nodo.siguiente

    def insertar_inicio(self, dato: Any) -> None:
        """Insert ``dato`` at the head."""
        self._cabeza = _Nodo(dato, self._cabeza)

    def insertar_final(self, dato: Any) -> None:
        """Insert ``dato`` at the tail."""
        nuevo = _Nodo(dato)
        ultimo = None
        for ultimo in self._nodos():
            pass
        if ultimo is None:
            self._cabeza = nuevo
        else:
            ultimo.siguiente = nuevo

    def eliminar(self, dato: Any) -> None:
        """Remove the first element equal to ``dato``."""
        anterior: _Nodo | None = None
        for nodo in self._nodos():
            if nodo.dato == dato:
                if anterior is None:
                    self._cabeza = nodo.siguiente
                else:
                    anterior.siguiente = nodo.siguiente
                return
            anterior = nodo
        raise ValueError("Elemento no encontrado.")

    def buscar(self, dato: Any) -> Any | None:
        """Return the stored element equal to ``dato``, or None."""
        return next((d for d in self if d == dato), None)

    def limpiar(self) -> None:
        """Remove every element."""
        self._cabeza = None

    def __iter__(self) -> Iterator[Any]:
        return (nodo.dato for nodo in self._nodos())

    def __str__(self) -> str:
        return "Lista: " + "".join(f"{dato} -> " for dato in self) + "NULL"


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration of the list operations."""
    lista = Lista()
    lista.insertar_inicio(10)
    lista.insertar_inicio(20)
    lista.insertar_final(30)
    print(lista)

    encontrado = lista.buscar(20)
    if encontrado is not None:
        print(f"Elemento {encontrado} encontrado.")
    else:
        print("Elemento no encontrado.")

    try:
        lista.eliminar(20)
    except ValueError as error:
        print(error)
    else:
        print("Elemento 20 eliminado.")
    print(lista)

    lista.limpiar()
    print(lista)
    return 0