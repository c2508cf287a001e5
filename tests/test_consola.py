import io

import pytest

from estructuras.consola import leer_entero, main


def _ejecutar(monkeypatch, capsys, texto, argv=()):
    monkeypatch.setattr("sys.stdin", io.StringIO(texto))
    codigo = main(list(argv))
    return codigo, capsys.readouterr().out


def test_leer_entero_escribe_mensaje():
    salida = io.StringIO()
    assert leer_entero(io.StringIO("42\n"), salida, "Num: ") == 42
    assert salida.getvalue() == "Num: "


def test_leer_entero_con_espacios_y_signo():
    assert leer_entero(io.StringIO("  -7 \n"), io.StringIO(), "") == -7


def test_leer_entero_no_numerico():
    with pytest.raises(ValueError):
        leer_entero(io.StringIO("abc\n"), io.StringIO(), "")


def test_leer_entero_fin_de_entrada():
    with pytest.raises(EOFError):
        leer_entero(io.StringIO(""), io.StringIO(), "")


def test_leer_varios_en_secuencia():
    entrada = io.StringIO("3\n8\n")
    salida = io.StringIO()
    assert [leer_entero(entrada, salida, ""), leer_entero(entrada, salida, "")] == [3, 8]


def test_push_y_longitud(monkeypatch, capsys):
    codigo, salida = _ejecutar(monkeypatch, capsys, "1\n1\n5\n0\n", ["--semilla", "1"])
    assert codigo == 0
    assert "Elemento insertado: ID = 1," in salida
    assert "Elemento insertado: ID = 2," in salida
    assert "Tamaño de la pila: 2" in salida
    assert salida.rstrip().endswith("Fin programa ...")


def test_pop_devuelve_ultimo(monkeypatch, capsys):
    _, salida = _ejecutar(monkeypatch, capsys, "1\n1\n2\n0\n", ["--semilla", "1"])
    assert "Elemento eliminado: ID = 2," in salida


def test_pop_en_pila_vacia(monkeypatch, capsys):
    _, salida = _ejecutar(monkeypatch, capsys, "2\n0\n")
    assert "La pila está vacía. No se puede eliminar." in salida


def test_peek_en_pila_vacia(monkeypatch, capsys):
    _, salida = _ejecutar(monkeypatch, capsys, "3\n0\n")
    assert "La pila está vacía." in salida
    assert "El nodo es NULL. No se puede imprimir." in salida


def test_peek_muestra_detalles(monkeypatch, capsys):
    _, salida = _ejecutar(monkeypatch, capsys, "1\n3\n0\n", ["--semilla", "4"])
    assert "Detalles del nodo superior:" in salida
    assert "ID: 1" in salida


@pytest.mark.parametrize("opcion", ["9", "x"])
def test_opcion_incorrecta(monkeypatch, capsys, opcion):
    codigo, salida = _ejecutar(monkeypatch, capsys, f"{opcion}\n0\n")
    assert codigo == 0
    assert "Error: ingreso un valor incorrecto" in salida


def test_fin_de_entrada_termina(monkeypatch, capsys):
    codigo, salida = _ejecutar(monkeypatch, capsys, "")
    assert codigo == 0
    assert "MENU" in salida


def test_semilla_hace_la_salida_reproducible(monkeypatch, capsys):
    texto = "1\n1\n1\n2\n0\n"
    _, primera = _ejecutar(monkeypatch, capsys, texto, ["--semilla", "11"])
    _, segunda = _ejecutar(monkeypatch, capsys, texto, ["--semilla", "11"])
    assert primera == segunda


def test_tabla_lista_elementos(monkeypatch, capsys):
    _, salida = _ejecutar(monkeypatch, capsys, "1\n4\n0\n", ["--semilla", "2"])
    assert "Contenido de la pila:" in salida
    assert "|  i  |   Valor   |     Direccion     |" in salida


def test_prueba_lee_numero(monkeypatch, capsys):
    codigo, salida = _ejecutar(monkeypatch, capsys, "15\n", ["--prueba"])
    assert codigo == 0
    assert "¡Todo está operando correctamente!" in salida
    assert "El numero ingresado es: 15" in salida


def test_prueba_con_entrada_invalida(monkeypatch, capsys):
    codigo, salida = _ejecutar(monkeypatch, capsys, "nada\n", ["--prueba"])
    assert codigo == 1
    assert "El numero ingresado es" not in salida