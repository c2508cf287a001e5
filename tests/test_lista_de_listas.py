import pytest

from estructuras.lista_de_listas import ListaDeListas


def _con_listas(n):
    lista = ListaDeListas()
    for _ in range(n):
        lista.insertar_lista()
    return lista


def test_insertar_lista_returns_positions():
    lista = ListaDeListas()
    assert [lista.insertar_lista() for _ in range(3)] == [0, 1, 2]
    assert len(lista) == 3
    assert list(lista) == [(), (), ()]


def test_values_go_to_the_chosen_list_in_order():
    lista = _con_listas(2)
    lista.insertar_valor(1, 7)
    lista.insertar_valor(1, 8)
    lista.insertar_valor(0, 3)
    assert list(lista) == [(3,), (7, 8)]


def test_negative_position_addresses_first_list():
    lista = _con_listas(2)
    lista.insertar_valor(-4, 9)
    assert list(lista) == [(9,), ()]
    lista.eliminar_valor(-1, 9)
    assert list(lista) == [(), ()]


def test_missing_inner_list():
    lista = _con_listas(1)
    with pytest.raises(IndexError):
        lista.insertar_valor(1, 5)
    with pytest.raises(IndexError):
        lista.eliminar_valor(1, 5)
    with pytest.raises(IndexError):
        ListaDeListas().insertar_valor(0, 5)


def test_eliminar_valor_removes_first_occurrence():
    lista = _con_listas(1)
    for valor in (4, 5, 4):
        lista.insertar_valor(0, valor)
    lista.eliminar_valor(0, 4)
    assert list(lista) == [(5, 4)]


def test_eliminar_valor_not_found():
    lista = _con_listas(1)
    lista.insertar_valor(0, 1)
    with pytest.raises(ValueError):
        lista.eliminar_valor(0, 2)
    assert list(lista) == [(1,)]


def test_eliminar_lista_returns_contents():
    lista = _con_listas(3)
    lista.insertar_valor(1, 6)
    assert lista.eliminar_lista(1) == (6,)
    assert len(lista) == 2
    assert list(lista) == [(), ()]


@pytest.mark.parametrize("posicion", [-1, 2])
def test_eliminar_lista_invalid_position(posicion):
    lista = _con_listas(2)
    with pytest.raises(IndexError):
        lista.eliminar_lista(posicion)
    assert len(lista) == 2


def test_eliminar_lista_on_empty():
    with pytest.raises(IndexError):
        ListaDeListas().eliminar_lista(0)


def test_iteration_returns_copies():
    lista = _con_listas(1)
    lista.insertar_valor(0, 1)
    copia = next(iter(lista))
    lista.insertar_valor(0, 2)
    assert copia == (1,)


def test_str_format():
    lista = _con_listas(2)
    lista.insertar_valor(0, 1)
    lista.insertar_valor(0, 2)
    lineas = str(lista).split("\n")
    assert lineas[0] == "Contenido de la lista de listas:"
    assert lineas[1] == lineas[-1] == "-" * 50
    assert lineas[2:6] == ["Lista interna 1:", "1 -> 2 -> NULL", "Lista interna 2:", "NULL"]
    assert len(lineas) == 7