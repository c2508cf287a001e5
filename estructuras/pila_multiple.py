"""Several stacks sharing one fixed capacity split evenly between them."""

from __future__ import annotations

__all__ = ["PilaMultiple", "NUM_PILAS", "CAPACIDAD"]

NUM_PILAS = 3
CAPACIDAD = 30

from .registro import EstructuraVaciaError  # noqa: E402


class PilaMultiple:
    """``num_pilas`` integer stacks, each holding ``capacidad // num_pilas`` values."""

    def __init__(self, num_pilas: int = NUM_PILAS, capacidad: int = CAPACIDAD) -> None:
        if num_pilas <= 0:
            raise ValueError("Se necesita al menos una pila")
        if capacidad < 0:
            raise ValueError("La capacidad no puede ser negativa")
        self._por_pila = capacidad // num_pilas
        self._pilas: list[list[int]] = [[] for _ in range(num_pilas)]

    @property
    def capacidad_por_pila(self) -> int:
        """Maximum number of values each stack can hold."""
        return self._por_pila

    def __len__(self) -> int:
        return len(self._pilas)

    def _pila(self, pila: int) -> list[int]:
        if not 0 <= pila < len(self._pilas):
            raise IndexError("Error: Número de pila inválido")
        return self._pilas[pila]

    def esta_llena(self, pila: int) -> bool:
        """Return True when stack ``pila`` has reached its share."""
        return len(self._pila(pila)) >= self._por_pila

    def esta_vacia(self, pila: int) -> bool:
        """Return True when stack ``pila`` holds nothing."""
        return not self._pila(pila)

    def push(self, pila: int, valor: int) -> None:
        """Put ``valor`` on top of stack ``pila``."""
        if self.esta_llena(pila):
            raise OverflowError(f"Error: La pila {pila} está llena")
        self._pilas[pila].append(valor)

    def pop(self, pila: int) -> int:
        """Remove and return the top value of stack ``pila``."""
        if self.esta_vacia(pila):
            raise EstructuraVaciaError(f"Error: La pila {pila} está vacía")
        return self._pilas[pila].pop()

    def peek(self, pila: int) -> int:
        """Return the top value of stack ``pila`` without removing it."""
        if self.esta_vacia(pila):
            raise EstructuraVaciaError(f"Error: La pila {pila} está vacía")
        return self._pilas[pila][-1]

    def contenido(self, pila: int) -> tuple[int, ...]:
        """Return the values of stack ``pila`` from bottom to top."""
        return tuple(self._pila(pila))