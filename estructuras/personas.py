"""A list of people, each stored by reference and addressed by position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["Persona", "ListaPersonas"]

_SEPARADOR = "-" * 50


@dataclass
class Persona:
    """A person with a name and an age."""

    nombre: str
    edad: int


class ListaPersonas:
    """Ordered collection of :class:`Persona` objects, kept by reference."""

    def __init__(self, personas: Iterable[Persona] = ()) -> None:
        self._personas: list[Persona] = []
        for persona in personas:
            self.insertar(persona)

    def insertar(self, persona: Persona) -> None:
        """Append ``persona`` at the end of the list."""
        self._personas.append(persona)

    def eliminar(self, posicion: int) -> Persona:
        """Remove and return the person at zero-based ``posicion``."""
        if not 0 <= posicion < len(self._personas):
            raise IndexError("Posicion invalida o lista vacía")
        return self._personas.pop(posicion)

    def __len__(self) -> int:
        return len(self._personas)

    def __iter__(self) -> Iterator[Persona]:
        return iter(tuple(self._personas))

    def __str__(self) -> str:
        lineas = ["Contenido de la lista enlazada de personas:", _SEPARADOR]
        lineas.extend(
            f"Nombre: {p.nombre}, Edad: {p.edad}" for p in self._personas
        )
        lineas.append(_SEPARADOR)
        return "\n".join(lineas)