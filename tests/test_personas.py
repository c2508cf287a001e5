import pytest

from estructuras.personas import ListaPersonas, Persona


def test_insertar_conserva_orden_y_referencias():
    ana = Persona("Ana", 30)
    luis = Persona("Luis Pérez", 41)
    lista = ListaPersonas()
    lista.insertar(ana)
    lista.insertar(luis)
    personas = list(lista)
    assert personas == [ana, luis]
    assert personas[0] is ana
    assert len(lista) == 2


def test_eliminar_posicion_intermedia():
    gente = [Persona("A", 1), Persona("B", 2), Persona("C", 3)]
    lista = ListaPersonas(gente)
    eliminada = lista.eliminar(1)
    assert eliminada is gente[1]
    assert list(lista) == [gente[0], gente[2]]
    assert len(lista) == 2


def test_eliminar_primera_y_ultima():
    gente = [Persona("A", 1), Persona("B", 2), Persona("C", 3)]
    lista = ListaPersonas(gente)
    assert lista.eliminar(0) is gente[0]
    assert lista.eliminar(1) is gente[2]
    assert list(lista) == [gente[1]]


@pytest.mark.parametrize("posicion", [-1, 1, 5])
def test_eliminar_posicion_invalida(posicion):
    lista = ListaPersonas([Persona("A", 1)])
    with pytest.raises(IndexError, match="Posicion invalida"):
        lista.eliminar(posicion)
    assert len(lista) == 1


def test_eliminar_en_lista_vacia():
    with pytest.raises(IndexError):
        ListaPersonas().eliminar(0)


def test_texto_de_la_lista():
    lista = ListaPersonas([Persona("Ana", 30)])
    separador = "-" * 50
    assert str(lista) == (
        "Contenido de la lista enlazada de personas:\n"
        f"{separador}\n"
        "Nombre: Ana, Edad: 30\n"
        f"{separador}"
    )


def test_texto_de_lista_vacia():
    lineas = str(ListaPersonas()).splitlines()
    assert lineas[0] == "Contenido de la lista enlazada de personas:"
    assert len(lineas) == 3