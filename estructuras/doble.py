"""Doubly linked lists of :class:`Registro`, with in-place sorting."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise

from .registro import EstructuraVaciaError, Registro, valor_aleatorio

__all__ = ["ListaReversible", "ListaDoble"]

_SEPARADOR = "-" * 50


@dataclass(slots=True, eq=False)
class _Nodo:
    dato: Registro
    siguiente: _Nodo | None = None
    anterior: _Nodo | None = None


def _direccion(nodo: _Nodo | None) -> str:
    return "(nil)" if nodo is None else f"{id(nodo):#x}"


def _intercambiar(a: _Nodo, b: _Nodo) -> None:
    a.dato, b.dato = b.dato, a.dato


class ListaReversible:
    """Doubly linked list that appends new records at the end."""

    titulo = "Contenido de la lista enlazada:"
    encabezado = (
        "|  i  |   Valor   |     Direccion     |   Siguiente   |   Anterior   |"
    )
    cierre = True

    def __init__(self, datos: Iterable[Registro] = ()) -> None:
        self._cabeza: _Nodo | None = None
        self._final: _Nodo | None = None
        self._longitud = 0
        for dato in datos:
            self.insertar(dato)

    def _nodos(self, desde: _Nodo | None = None) -> Iterator[_Nodo]:
        nodo = self._cabeza if desde is None else desde
        while nodo is not None:
            siguiente = nodo.siguiente
            yield nodo
            nodo = siguiente

    def _nodos_inversos(self) -> Iterator[_Nodo]:
        nodo = self._final
        while nodo is not None:
            anterior = nodo.anterior
            yield nodo
            nodo = anterior

    def insertar(self, dato: Registro) -> None:
        """Append ``dato`` at the end of the list."""
        nodo = _Nodo(dato, anterior=self._final)
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
        for nodo in self._nodos():
            if nodo.dato.i == i:
                if nodo.anterior is None:
                    self._cabeza = nodo.siguiente
                else:
                    nodo.anterior.siguiente = nodo.siguiente
                if nodo.siguiente is None:
                    self._final = nodo.anterior
                else:
                    nodo.siguiente.anterior = nodo.anterior
                nodo.siguiente = nodo.anterior = None
                self._longitud -= 1
                return nodo.dato
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
        lineas = [self.titulo, _SEPARADOR, self.encabezado, _SEPARADOR]
        lineas.extend(
            f"| {nodo.dato.i:3d} | {nodo.dato.valor:9d} | {_direccion(nodo)} | "
            f"{_direccion(nodo.siguiente)} | {_direccion(nodo.anterior)} |"
            for nodo in self._nodos()
        )
        if self.cierre:
            lineas.append(_SEPARADOR)
        return "\n".join(lineas)

    def __len__(self) -> int:
        return self._longitud

    def __iter__(self) -> Iterator[Registro]:
        return (nodo.dato for nodo in self._nodos())

    def __reversed__(self) -> Iterator[Registro]:
        return (nodo.dato for nodo in self._nodos_inversos())


def _partir(cabeza: _Nodo) -> _Nodo | None:
    lento = cabeza
    rapido = cabeza.siguiente
    while rapido is not None:
        rapido = rapido.siguiente
        if rapido is not None:
            lento = lento.siguiente
            rapido = rapido.siguiente
    medio = lento.siguiente
    lento.siguiente = None
    return medio


def _mezclar(izquierda: _Nodo | None, derecha: _Nodo | None) -> _Nodo | None:
    cabeza: _Nodo | None = None
    cola: _Nodo | None = None
    while izquierda is not None and derecha is not None:
        if izquierda.dato.valor <= derecha.dato.valor:
            tomado, izquierda = izquierda, izquierda.siguiente
        else:
            tomado, derecha = derecha, derecha.siguiente
        if cola is None:
            cabeza = tomado
        else:
            cola.siguiente = tomado
        cola = tomado
    resto = izquierda if izquierda is not None else derecha
    if cola is None:
        return resto
    cola.siguiente = resto
    return cabeza


def _ordenar_mezcla(cabeza: _Nodo | None) -> _Nodo | None:
    if cabeza is None or cabeza.siguiente is None:
        return cabeza
    medio = _partir(cabeza)
    return _mezclar(_ordenar_mezcla(cabeza), _ordenar_mezcla(medio))


class ListaDoble(ListaReversible):
    """Doubly linked list that can be sorted by ``valor`` in several ways."""

    titulo = "Contenido de la lista doblemente enlazada:"
    encabezado = "|  i  |   Valor   | Direccion | Siguiente | Anterior |"
    cierre = False

    def burbuja(self) -> None:
        """Bubble sort by ``valor``."""
        if self._longitud < 2:
            return
        intercambiado = True
        while intercambiado:
            intercambiado = False
            for actual, siguiente in pairwise(self._nodos()):
                if actual.dato.valor > siguiente.dato.valor:
                    _intercambiar(actual, siguiente)
                    intercambiado = True

    def seleccion(self) -> None:
        """Selection sort by ``valor``."""
        if self._longitud < 2:
            return
        for nodo in self._nodos():
            minimo = min(self._nodos(nodo), key=lambda n: n.dato.valor)
            if minimo is not nodo:
                _intercambiar(nodo, minimo)

    def insercion(self) -> None:
        """Insertion sort by ``valor``."""
        if self._longitud < 2:
            return
        assert self._cabeza is not None
        for nodo in self._nodos(self._cabeza.siguiente):
            actual = nodo
            while (
                actual.anterior is not None
                and actual.dato.valor < actual.anterior.dato.valor
            ):
                _intercambiar(actual.anterior, actual)
                actual = actual.anterior

    def shell_sort(self) -> None:
        """Shell sort by ``valor`` with gaps halving from half the length."""
        if self._longitud < 2:
            return
        nodos = list(self._nodos())
        salto = len(nodos) // 2
        while salto > 0:
            for k in range(salto, len(nodos)):
                j = k
                while j >= salto and nodos[j - salto].dato.valor > nodos[j].dato.valor:
                    _intercambiar(nodos[j - salto], nodos[j])
                    j -= salto
            salto //= 2

    def _particionar(self, inicio: _Nodo, final: _Nodo) -> _Nodo:
        pivote = final.dato.valor
        i = inicio.anterior
        j: _Nodo | None = inicio
        while j is not final:
            assert j is not None
            if j.dato.valor <= pivote:
                i = inicio if i is None else i.siguiente
                assert i is not None
                _intercambiar(i, j)
            j = j.siguiente
        i = inicio if i is None else i.siguiente
        assert i is not None
        _intercambiar(i, final)
        return i

    def quicksort(self) -> None:
        """Quicksort by ``valor`` using the last node of each range as pivot."""
        pendientes = [(self._cabeza, self._final)]
        while pendientes:
            inicio, final = pendientes.pop()
            if (
                inicio is None
                or final is None
                or inicio is final
                or inicio is final.siguiente
            ):
                continue
            pivote = self._particionar(inicio, final)
            pendientes.append((inicio, pivote.anterior))
            pendientes.append((pivote.siguiente, final))

    def cocktail_shaker(self) -> None:
        """Cocktail shaker sort by ``valor``."""
        if self._longitud < 2:
            return
        while True:
            intercambiado = False
            for actual, siguiente in pairwise(self._nodos()):
                if actual.dato.valor > siguiente.dato.valor:
                    _intercambiar(actual, siguiente)
                    intercambiado = True
            if not intercambiado:
                break
            intercambiado = False
            for siguiente, actual in pairwise(self._nodos_inversos()):
                if siguiente.dato.valor < actual.dato.valor:
                    _intercambiar(actual, siguiente)
                    intercambiado = True
            if not intercambiado:
                break

    def merge_sort(self) -> None:
        """Stable merge sort by ``valor`` that relinks the nodes."""
        self._cabeza = _ordenar_mezcla(self._cabeza)
        anterior: _Nodo | None = None
        for nodo in self._nodos():
            nodo.anterior = anterior
            anterior = nodo
        self._final = anterior