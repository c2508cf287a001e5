"""A last-in, first-out stack of :class:`Registro` that can be reversed."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .registro import EstructuraVaciaError, Registro

__all__ = ["PilaReversible"]

_SEPARADOR = "-" * 50


class PilaReversible:
    """Stack whose order can be turned upside down in place."""

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
            raise EstructuraVaciaError("Error: La pila está vacía")
        return self._datos.pop()

    def peek(self) -> Registro:
        """Return the top record without removing it."""
        if not self._datos:
            raise EstructuraVaciaError("Error: La pila está vacía")
        return self._datos[-1]

    def revertir(self) -> bool:
        """Reverse the stack; return False when it has fewer than two records."""
        if len(self._datos) < 2:
            return False
        self._datos.reverse()
        return True

    def __len__(self) -> int:
        return len(self._datos)

    def __iter__(self) -> Iterator[Registro]:
        return reversed(tuple(self._datos))

    def __str__(self) -> str:
        if not self._datos:
            return "La pila está vacía"
        lineas = [
            "Contenido de la pila:",
            _SEPARADOR,
            "|  i  |   Valor   |   Dirección   |",
            _SEPARADOR,
        ]
        lineas.extend(f"| {d.i:3d} | {d.valor:9d} | {id(d):#x} |" for d in self)
        lineas.append(_SEPARADOR)
        return "\n".join(lineas)