"""Singly linked lists of :class:`Registro` keyed by their identifier."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .registro import EstructuraVaciaError, Registro, valor_aleatorio

__all__ = ["ListaEnlazada", "ListaOrdenada"]

_SEPARADOR = "-" * 50


@dataclass(slots=True, eq=False)
class _Nodo:
    dato: Registro
    siguiente: _Nodo | None = None


def _direccion(nodo: _Nodo | None) -> str:
    return "(nil)" if nodo is None else f"{id(nodo):#x}"


class ListaEnlazada:
    """Singly linked list that appends new records at the end."""

    titulo = "Contenido de la lista enlazada:"

    def __init__(self, datos: Iterable[Registro] = ()) -> None:
        self._cabeza: _Nodo | None = None
        self._final: _Nodo | None = None
        self._longitud = 0
        for dato in datos:
            self.insertar(dato)

    def _nodos(self) -> Iterator[_Nodo]:
        nodo = self._cabeza
        while nodo is not None:
            siguiente = nodo.siguiente
            yield nodo
            nodo = siguiente

    def insertar(self, dato: Registro) -> None:
        """Append ``dato`` at the end of the list."""
        nodo = _Nodo(dato)
        if self._final is None:
            self._cabeza = nodo
        else:
            self._final.siguiente = nodo
        self._final = nodo
        self._longitud += 1

    def eliminar(self, i: int) -> Registro | None:
        """Remove the first record with identifier ``i``; return it, or None."""
        if self._cabeza is None:
            raise EstructuraVaciaError("La lista está vacía")
        anterior: _Nodo | None = None
        for nodo in self._nodos():
            if nodo.dato.i == i:
                if anterior is None:
                    self._cabeza = nodo.siguiente
                else:
                    anterior.siguiente = nodo.siguiente
                if nodo is self._final:
                    self._final = anterior
                self._longitud -= 1
                return nodo.dato
            anterior = nodo
        return None

    def modificar(self, i: int, rng: random.Random | None = None) -> Registro | None:
        """Give the record with identifier ``i`` a new random value."""
        if self._cabeza is None:
            raise EstructuraVaciaError("Vacio")
        registro = self.consultar(i)
        if registro is not None:
            registro.valor = valor_aleatorio(rng)
        return registro

    def consultar(self, i: int) -> Registro | None:
        """Return the first record with identifier ``i``, or None."""
        return next((dato for dato in self if dato.i == i), None)

    def tabla(self) -> str:
        """Render the list as a table of records and node addresses."""
        lineas = [
            self.titulo,
            _SEPARADOR,
            "|  i  |   Valor   |     Direccion     |   Siguiente   |",
            _SEPARADOR,
        ]
        lineas.extend(
            f"| {nodo.dato.i:3d} | {nodo.dato.valor:9d} | "
            f"{_direccion(nodo)} | {_direccion(nodo.siguiente)} |"
            for nodo in self._nodos()
        )
        lineas.append(_SEPARADOR)
        return "\n".join(lineas)

    def __len__(self) -> int:
        return self._longitud

    def __iter__(self) -> Iterator[Registro]:
        return (nodo.dato for nodo in self._nodos())


class ListaOrdenada(ListaEnlazada):
    """Linked list that keeps records in ascending order of ``valor``."""

    titulo = "Contenido de la lista enlazada ordenada:"

    def insertar(self, dato: Registro) -> None:
        """Insert ``dato`` after every record whose value is not greater."""
        nodo = _Nodo(dato)
        if self._cabeza is None or self._cabeza.dato.valor > dato.valor:
            nodo.siguiente = self._cabeza
            self._cabeza = nodo
            if self._final is None:
                self._final = nodo
        else:
            actual = self._cabeza
            while (
                actual.siguiente is not None
                and actual.siguiente.dato.valor <= dato.valor
            ):
                actual = actual.siguiente
            nodo.siguiente = actual.siguiente
            actual.siguiente = nodo
            if actual is self._final:
                self._final = nodo
        self._longitud += 1