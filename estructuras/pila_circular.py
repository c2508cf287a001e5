"""A bounded circular buffer of :class:`Registro` with first-in, first-out removal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from .registro import EstructuraVaciaError, Registro

__all__ = ["PilaCircular", "CAPACIDAD"]

CAPACIDAD = 5


class PilaCircular:
    """Circular structure of fixed capacity.

    Records are pushed at the end and popped from the start, so they come
    out in the order they went in.
    """

    def __init__(
        self, datos: Iterable[Registro] = (), capacidad: int = CAPACIDAD
    ) -> None:
        if capacidad <= 0:
            raise ValueError("La capacidad debe ser positiva")
        self._capacidad = capacidad
        self._datos: deque[Registro] = deque()
        for dato in datos:
            self.push(dato)

    @property
    def capacidad(self) -> int:
        """Maximum number of records held at once."""
        return self._capacidad

    def esta_vacia(self) -> bool:
        """Return True when no record is stored."""
        return not self._datos

    def esta_llena(self) -> bool:
        """Return True when the capacity is reached."""
        return len(self._datos) == self._capacidad

    def push(self, dato: Registro) -> None:
        """Store ``dato`` at the end; raise OverflowError when full."""
        if self.esta_llena():
            raise OverflowError("Error: La pila está llena.")
        self._datos.append(dato)

    def pop(self) -> Registro:
        """Remove and return the oldest record."""
        if self.esta_vacia():
            raise EstructuraVaciaError("Error: La pila está vacía.")
        return self._datos.popleft()

    def __len__(self) -> int:
        return len(self._datos)

    def __iter__(self) -> Iterator[Registro]:
        return iter(tuple(self._datos))

    def __str__(self) -> str:
        if self.esta_vacia():
            return "La pila está vacía."
        lineas = ["Contenido de la pila circular:"]
        lineas.extend(f"ID = {d.i}, Valor = {d.valor}" for d in self._datos)
        return "\n".join(lineas)