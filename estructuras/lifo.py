"""A last-in, first-out stack of :class:`Registro`."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .registro import EstructuraVaciaError, Registro

__all__ = ["Pila"]

_SEPARADOR = "-" * 42


class Pila:
    """Unbounded stack whose top is the most recently pushed record."""

    def __init__(self, datos: Iterable[Registro] = ()) -> None:
        self._datos: list[Registro] = []
        for dato in datos:
            self.push(dato)

    def push(self, dato: Registro) -> None:
        """Put ``dato`` on top of the stack."""
        self._datos.append(dato)

    def pop(self) -> Registro:
        """Remove and return the top record."""
        if not self._datos:
            raise EstructuraVaciaError("La pila está vacía. No se puede eliminar.")
        return self._datos.pop()

    def peek(self) -> Registro:
        """Return the top record without removing it."""
        if not self._datos:
            raise EstructuraVaciaError("La pila está vacía.")
        return self._datos[-1]

    def esta_vacia(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._datos

    def tabla(self) -> str:
        """Render the stack, top first, with each record's address."""
        lineas = [
            "Contenido de la pila:",
            _SEPARADOR,
            "|  i  |   Valor   |     Direccion     |",
            _SEPARADOR,
        ]
        lineas.extend(
            f"| {d.i:3d} | {d.valor:9d} | {id(d):#x} |" for d in self
        )
        lineas.append(_SEPARADOR)
        return "\n".join(lineas)

    def __len__(self) -> int:
        return len(self._datos)

    def __iter__(self) -> Iterator[Registro]:
        return reversed(tuple(self._datos))