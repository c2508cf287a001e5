"""Interactive console for the stack, plus a simple input check."""

from __future__ import annotations

import argparse
import random
import sys
from typing import TextIO

from .lifo import Pila
from .registro import EstructuraVaciaError, Registro, valor_aleatorio

__all__ = ["leer_entero", "main"]

_MENU = (
    "MENU\n\n"
    "1. Insertar elemento (push)\n"
    "2. Eliminar elemento (pop)\n"
    "3. Consultar elemento superior (peek)\n"
    "4. Imprimir pila\n"
    "5. Consultar longitud de la pila\n"
    "0. Fin programa\n\n"
)


def leer_entero(
    entrada: TextIO | None = None, salida: TextIO | None = None, mensaje: str = ""
) -> int:
    """Write ``mensaje``, then read one line holding an integer.

    Raises EOFError at end of input and ValueError when the line is not
    an integer.
    """
    entrada = sys.stdin if entrada is None else entrada
    salida = sys.stdout if salida is None else salida
    if mensaje:
        salida.write(mensaje)
        salida.flush()
    linea = entrada.readline()
    if not linea:
        raise EOFError("Fin de la entrada")
    try:
        return int(linea.strip())
    except ValueError:
        raise ValueError(f"Se esperaba un número entero: {linea.strip()!r}") from None


def _prueba(entrada: TextIO, salida: TextIO) -> int:
    print("Prueba de funcionamiento: ¡Todo está operando correctamente!", file=salida)
    try:
        numero = leer_entero(entrada, salida, "Por favor ingrese un número entero: ")
    except (EOFError, ValueError) as error:
        print(f"\n{error}", file=sys.stderr)
        return 1
    print(f"El numero ingresado es: {numero}", file=salida)
    return 0


def _menu_pila(entrada: TextIO, salida: TextIO, rng: random.Random) -> int:
    pila = Pila()
    ultimo_id = 0
    while True:
        salida.write(_MENU)
        try:
            seleccion: int | None = leer_entero(
                entrada, salida, "> Seleccione una opcion: "
            )
        except EOFError:
            salida.write("\n")
            return 0
        except ValueError:
            seleccion = None

        match seleccion:
            case 1:
                ultimo_id += 1
                dato = Registro(ultimo_id, valor_aleatorio(rng))
                pila.push(dato)
                print(
                    f"Elemento insertado: ID = {dato.i}, Valor = {dato.valor}",
                    file=salida,
                )
            case 2:
                try:
                    dato = pila.pop()
                except EstructuraVaciaError as error:
                    print(error, file=salida)
                else:
                    print(
                        f"Elemento eliminado: ID = {dato.i}, Valor = {dato.valor}",
                        file=salida,
                    )
            case 3:
                try:
                    dato = pila.peek()
                except EstructuraVaciaError as error:
                    print(error, file=salida)
                    print("El nodo es NULL. No se puede imprimir.", file=salida)
                else:
                    print("Detalles del nodo superior:", file=salida)
                    print(f"ID: {dato.i}", file=salida)
                    print(f"Valor: {dato.valor}", file=salida)
                    print(f"Direccion: {id(dato):#x}", file=salida)
            case 4:
                print(pila.tabla(), file=salida)
            case 5:
                print(f"Tamaño de la pila: {len(pila)}", file=salida)
            case 0:
                print("Fin programa ...", file=salida)
                return 0
            case _:
                print("Error: ingreso un valor incorrecto", file=salida)


def main(argv: list[str] | None = None) -> int:
    """Run the stack menu, or the input check with ``--prueba``."""
    parser = argparse.ArgumentParser(
        prog="estructuras-pila", description="Menú interactivo de una pila."
    )
    parser.add_argument(
        "--prueba",
        action="store_true",
        help="leer un número entero y mostrarlo",
    )
    parser.add_argument(
        "--semilla", type=int, default=None, help="semilla de los valores aleatorios"
    )
    args = parser.parse_args(argv)
    if args.prueba:
        return _prueba(sys.stdin, sys.stdout)
    return _menu_pila(sys.stdin, sys.stdout, random.Random(args.semilla))