import random

import pytest

from estructuras.doble import ListaDoble, ListaReversible
from estructuras.registro import EstructuraVaciaError, Registro, valor_aleatorio

METODOS = [
    "burbuja",
    "seleccion",
    "insercion",
    "shell_sort",
    "quicksort",
    "cocktail_shaker",
    "merge_sort",
]


def _registros(valores):
    return [Registro(k + 1, v) for k, v in enumerate(valores)]


@pytest.mark.parametrize("clase", [ListaReversible, ListaDoble])
def test_insertar_keeps_order_both_ways(clase):
    registros = _registros([5, 3, 9])
    lista = clase(registros)
    assert list(lista) == registros
    assert list(reversed(lista)) == registros[::-1]
    assert len(lista) == 3


def test_eliminar_head_middle_tail():
    registros = _registros([1, 2, 3, 4, 5])
    lista = ListaReversible(registros)
    assert lista.eliminar(1) == registros[0]
    assert lista.eliminar(3) == registros[2]
    assert lista.eliminar(5) == registros[4]
    esperados = [registros[1], registros[3]]
    assert list(lista) == esperados
    assert list(reversed(lista)) == esperados[::-1]
    assert len(lista) == 2


def test_eliminar_last_element_empties_list():
    lista = ListaReversible(_registros([7]))
    lista.eliminar(1)
    assert list(lista) == []
    assert list(reversed(lista)) == []
    lista.insertar(Registro(2, 4))
    assert [r.i for r in lista] == [2]


def test_eliminar_missing_returns_none():
    lista = ListaReversible(_registros([1, 2]))
    assert lista.eliminar(42) is None
    assert len(lista) == 2


def test_eliminar_empty_raises():
    with pytest.raises(EstructuraVaciaError):
        ListaReversible().eliminar(1)


def test_modificar_empty_raises():
    with pytest.raises(EstructuraVaciaError):
        ListaDoble().modificar(1)


def test_modificar_uses_rng():
    lista = ListaReversible(_registros([1, 2, 3]))
    registro = lista.modificar(2, random.Random(7))
    assert registro is lista.consultar(2)
    assert registro.valor == valor_aleatorio(random.Random(7))
    assert 0 <= registro.valor < 100


def test_modificar_missing_returns_none():
    lista = ListaReversible(_registros([1]))
    assert lista.modificar(9, random.Random(1)) is None
    assert [r.valor for r in lista] == [1]


def test_consultar():
    registros = _registros([4, 8])
    lista = ListaDoble(registros)
    assert lista.consultar(2) is registros[1]
    assert lista.consultar(3) is None
    assert ListaDoble().consultar(1) is None


def test_tabla_reversible_format():
    lista = ListaReversible([Registro(1, 5)])
    lineas = lista.tabla().splitlines()
    assert lineas[0] == "Contenido de la lista enlazada:"
    assert lineas[2] == (
        "|  i  |   Valor   |     Direccion     |   Siguiente   |   Anterior   |"
    )
    assert lineas[4].startswith("|   1 |         5 | 0x")
    assert lineas[4].endswith("| (nil) | (nil) |")
    assert lineas[-1] == "-" * 50
    assert len(lineas) == 6


def test_tabla_doble_format():
    lista = ListaDoble(_registros([1, 2]))
    lineas = lista.tabla().splitlines()
    assert lineas[0] == "Contenido de la lista doblemente enlazada:"
    assert lineas[2] == "|  i  |   Valor   | Direccion | Siguiente | Anterior |"
    assert len(lineas) == 6
    assert lineas[-1].endswith("|")


@pytest.mark.parametrize("metodo", METODOS)
@pytest.mark.parametrize(
    "valores",
    [[], [3], [5, 1], [9, 3, 7, 1, 8, 2, 2, 0, 6], [1, 2, 3, 4], [4, 3, 2, 1, 0]],
)
def test_sorting_orders_by_valor(metodo, valores):
    registros = _registros(valores)
    lista = ListaDoble(registros)
    getattr(lista, metodo)()
    resultado = list(lista)
    assert [r.valor for r in resultado] == sorted(valores)
    assert sorted(r.i for r in resultado) == [r.i for r in registros]
    assert list(reversed(lista)) == resultado[::-1]
    assert len(lista) == len(valores)


@pytest.mark.parametrize("metodo", METODOS)
def test_sorting_random_lists(metodo):
    rng = random.Random(123)
    for _ in range(20):
        valores = [rng.randrange(100) for _ in range(rng.randrange(15))]
        lista = ListaDoble(_registros(valores))
        getattr(lista, metodo)()
        assert [r.valor for r in lista] == sorted(valores)
        assert [r.valor for r in reversed(lista)] == sorted(valores, reverse=True)


@pytest.mark.parametrize("metodo", ["burbuja", "insercion", "merge_sort", "cocktail_shaker"])
def test_stable_sorts_keep_equal_records_in_order(metodo):
    registros = _registros([2, 1, 2, 1, 2])
    lista = ListaDoble(registros)
    getattr(lista, metodo)()
    esperado = sorted(registros, key=lambda r: r.valor)
    assert [r.i for r in lista] == [r.i for r in esperado]


def test_merge_sort_keeps_list_usable():
    lista = ListaDoble(_registros([3, 1, 2]))
    lista.merge_sort()
    lista.insertar(Registro(4, 0))
    assert [r.i for r in lista] == [2, 3, 1, 4]
    assert lista.eliminar(4).valor == 0
    assert [r.i for r in reversed(lista)] == [1, 3, 2]