"""Records stored by the list and stack structures, plus shared helpers."""

from __future__ import annotations

import random
from dataclasses import dataclass

__all__ = ["Registro", "EstructuraVaciaError", "valor_aleatorio"]


@dataclass
class Registro:
    """A record with an identifier ``i`` and an integer ``valor``."""

    i: int
    valor: int


class EstructuraVaciaError(LookupError):
    """Raised when an operation needs elements but the structure is empty."""


def valor_aleatorio(rng: random.Random | None = None) -> int:
    """Return a pseudo-random integer in ``range(100)``."""
    fuente = rng if rng is not None else random
    return fuente.randrange(100)