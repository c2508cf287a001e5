"""A list of integer lists, each addressed by its zero-based position."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["ListaDeListas"]

_SEPARADOR = "-" * 50


class ListaDeListas:
    """Ordered collection of inner lists of integers."""

    def __init__(self) -> None:
        self._listas: list[list[int]] = []

    def _interna(self, posicion: int) -> list[int]:
        # A negative position addresses the first inner list.
        indice = max(posicion, 0)
        if indice >= len(self._listas):
            raise IndexError("Lista interna no encontrada")
        return self._listas[indice]

    def insertar_lista(self) -> int:
        """Append a new empty inner list and return its position."""
        self._listas.append([])
        return len(self._listas) - 1

    def insertar_valor(self, posicion: int, valor: int) -> None:
        """Append ``valor`` to the inner list at ``posicion``."""
        self._interna(posicion).append(valor)

    def eliminar_lista(self, posicion: int) -> tuple[int, ...]:
        """Remove the inner list at ``posicion`` and return its values."""
        if not 0 <= posicion < len(self._listas):
            raise IndexError("Posición inválida o lista vacía")
        return tuple(self._listas.pop(posicion))

    def eliminar_valor(self, posicion: int, valor: int) -> None:
        """Remove the first ``valor`` from the inner list at ``posicion``."""
        interna = self._interna(posicion)
        try:
            interna.remove(valor)
        except ValueError:
            raise ValueError("Valor no encontrado en la lista interna") from None

    def __len__(self) -> int:
        return len(self._listas)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return (tuple(interna) for interna in self._listas)

    def __str__(self) -> str:
        lineas = ["Contenido de la lista de listas:", _SEPARADOR]
        for numero, interna in enumerate(self._listas, start=1):
            lineas.append(f"Lista interna {numero}:")
            lineas.append("".join(f"{v} -> " for v in interna) + "NULL")
        lineas.append(_SEPARADOR)
        return "\n".join(lineas)