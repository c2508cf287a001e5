"""A stack whose top is always the element of highest priority."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .registro import EstructuraVaciaError

__all__ = ["ElementoPrioridad", "PilaPrioridad"]

_SEPARADOR = "-" * 50


@dataclass
class ElementoPrioridad:
    """A record with identifier, value and priority."""

    i: int
    valor: int
    prioridad: int


class PilaPrioridad:
    """Elements ordered by descending priority; equal ones keep insertion order."""

    def __init__(self, datos: Iterable[ElementoPrioridad] = ()) -> None:
        self._datos: list[ElementoPrioridad] = []
        for dato in datos:
            self.push(dato)

    def push(self, dato: ElementoPrioridad) -> None:
        """Insert ``dato`` after every element of priority not lower."""
        insort(self._datos, dato, key=lambda e: -e.prioridad)

    def pop(self) -> ElementoPrioridad:
        """Remove and return the element of highest priority."""
        if not self._datos:
            raise EstructuraVaciaError("Error: La pila está vacía")
        return self._datos.pop(0)

    def peek(self) -> ElementoPrioridad:
        """Return the element of highest priority without removing it."""
        if not self._datos:
            raise EstructuraVaciaError("Error: La pila está vacía")
        return self._datos[0]

    def __len__(self) -> int:
        return len(self._datos)

    def __iter__(self) -> Iterator[ElementoPrioridad]:
        return iter(tuple(self._datos))

    def __str__(self) -> str:
        if not self._datos:
            return "La pila está vacía"
        lineas = [
            "Contenido de la pila de prioridad:",
            _SEPARADOR,
            "|  i  |   Valor   | Prioridad |   Dirección   |",
            _SEPARADOR,
        ]
        lineas.extend(
            f"| {e.i:3d} | {e.valor:9d} | {e.prioridad:9d} | {id(e):#x} |"
            for e in self._datos
        )
        lineas.append(_SEPARADOR)
        return "\n".join(lineas)