"""Process trees built with fork, where every process reports who it is.

Each function returns the :class:`InfoProceso` records written by the
processes it created, ordered by level.
"""

from __future__ import annotations

import fcntl
import json
import os
import random
import subprocess
import sys
import tempfile
import traceback
from collections.abc import Callable, Iterable, Sequence
from dataclasses import asdict, dataclass
from functools import partial
from pathlib import Path

__all__ = [
    "InfoProceso",
    "mostrar_pids",
    "crear_cadena",
    "crear_arbol_balanceado",
    "crear_hijos_aleatorios",
    "crear_hijos_bifurcados",
    "crear_hijos_lineales",
    "generar_grafico",
    "crear_arbol_h",
    "concurrencia",
]


@dataclass(frozen=True)
class InfoProceso:
    """What one process of a tree reports about itself."""

    nivel: int
    pid: int
    ppid: int
    hijos: int = 0
    nombre: str = ""


class _Bitacora:
    """Append-only log shared by every process of a tree."""

    def __init__(self, fd: int) -> None:
        flags = fcntl.fcntl(fd, fcntl.F_GETFL)
        fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_APPEND)
        self._fd = fd

    def anotar(self, nivel: int, hijos: int = 0, nombre: str = "") -> InfoProceso:
        info = InfoProceso(nivel, os.getpid(), os.getppid(), hijos, nombre)
        os.write(self._fd, (json.dumps(asdict(info)) + "\n").encode())
        return info


def _recolectar(raiz: Callable[[_Bitacora], None]) -> list[InfoProceso]:
    with tempfile.TemporaryFile() as archivo:
        raiz(_Bitacora(archivo.fileno()))
        archivo.seek(0)
        lineas = archivo.read().decode().splitlines()
    registros = [InfoProceso(**json.loads(linea)) for linea in lineas]
    registros.sort(key=lambda r: r.nivel)
    return registros


def _bifurcar(trabajo: Callable[[], object]) -> int:
    """Fork; the child runs ``trabajo`` and exits, the parent gets the pid."""
    sys.stdout.flush()
    sys.stderr.flush()
    pid = os.fork()
    if pid != 0:
        return pid
    try:
        trabajo()
        codigo = 0
    except SystemExit as salida:
        if isinstance(salida.code, int):
            codigo = salida.code
        else:
            codigo = 0 if salida.code is None else 1
    except BaseException:
        traceback.print_exc()
        codigo = 1
    try:
        sys.stdout.flush()
        sys.stderr.flush()
    finally:
        os._exit(codigo)


def _esperar(pids: Iterable[int]) -> None:
    for pid in pids:
        os.waitpid(pid, 0)


def mostrar_pids() -> list[InfoProceso]:
    """Fork one child and show the identifiers of child, parent and caller."""

    def hijo(bitacora: _Bitacora) -> None:
        info = bitacora.anotar(1, nombre="Hijo")
        print("Proceso hijo del proceso que ejecuta el programa")
        print(f"Hijo - id: {info.pid}")
        print("El id del proceso que ejecuta el programa")
        print(f"Padre - id: {info.ppid}")
        print("El id del proceso que llamo al programa")
        print(f"Padre del padre - id: {os.getppid()}")

    def raiz(bitacora: _Bitacora) -> None:
        bitacora.anotar(0, hijos=1, nombre="Padre")
        pid = _bifurcar(partial(hijo, bitacora))
        print("El id del proceso que llamo al programa")
        print(f"Padre del padre - id: {os.getppid()}")
        _esperar([pid])

    return _recolectar(raiz)


def _cadena(bitacora: _Bitacora, nivel: int, max_nivel: int) -> None:
    if nivel > max_nivel:
        return
    info = bitacora.anotar(nivel, hijos=1)
    print(f"Proceso de nivel {nivel} con PID {info.pid}, Padre PID: {info.ppid}")
    _esperar([_bifurcar(partial(_cadena, bitacora, nivel + 1, max_nivel))])


def crear_cadena(max_nivel: int = 5) -> list[InfoProceso]:
    """Build a chain where each process, from level 1 on, forks one child."""
    return _recolectar(partial(_cadena, nivel=1, max_nivel=max_nivel))


def _ramificar(
    bitacora: _Bitacora,
    nivel: int,
    max_nivel: int,
    cuantos: Callable[[], int],
) -> None:
    if nivel > max_nivel:
        return
    num_hijos = cuantos()
    info = bitacora.anotar(nivel, hijos=num_hijos)
    print(
        f"Proceso de nivel {nivel} con PID {info.pid}, "
        f"Padre PID: {info.ppid}, Creando {num_hijos} hijos"
    )
    _esperar(
        [
            _bifurcar(partial(_ramificar, bitacora, nivel + 1, max_nivel, cuantos))
            for _ in range(num_hijos)
        ]
    )


def crear_arbol_balanceado(max_nivel: int = 3, num_hijos: int = 2) -> list[InfoProceso]:
    """Build a tree where every process forks ``num_hijos`` children."""
    if num_hijos < 0:
        raise ValueError("El número de hijos no puede ser negativo")
    return _recolectar(
        partial(_ramificar, nivel=1, max_nivel=max_nivel, cuantos=lambda: num_hijos)
    )


def crear_hijos_aleatorios(
    max_nivel: int = 3, rng: random.Random | None = None
) -> list[InfoProceso]:
    """Build a tree where every process forks between 1 and 3 children.

    A child inherits a copy of its parent's generator, so with an explicit
    ``rng`` siblings draw the same number.
    """
    fuente = rng if rng is not None else random
    return _recolectar(
        partial(
            _ramificar,
            nivel=1,
            max_nivel=max_nivel,
            cuantos=lambda: fuente.randint(1, 3),
        )
    )


def _bifurcado(bitacora: _Bitacora, nivel: int, max_nivel: int) -> None:
    if nivel > max_nivel:
        return
    _esperar(
        [
            _bifurcar(partial(_hijo_bifurcado, bitacora, nivel, max_nivel))
            for _ in range(2)
        ]
    )


def _hijo_bifurcado(bitacora: _Bitacora, nivel: int, max_nivel: int) -> None:
    info = bitacora.anotar(nivel, hijos=2 if nivel < max_nivel else 0)
    print(f"Hijo de nivel {nivel} con PID {info.pid}, Padre PID: {info.ppid}")
    _bifurcado(bitacora, nivel + 1, max_nivel)


def crear_hijos_bifurcados(max_nivel: int = 3) -> list[InfoProceso]:
    """Fork two children per process, level after level; the caller is not recorded."""
    return _recolectar(partial(_bifurcado, nivel=1, max_nivel=max_nivel))


def _lineal(bitacora: _Bitacora, nivel: int, max_nivel: int) -> None:
    if nivel > max_nivel:
        return
    pid = _bifurcar(partial(_hijo_lineal, bitacora, nivel, max_nivel))
    print(f"Padre: PID {os.getpid()}, Creó hijo PID: {pid}")
    _esperar([pid])


def _hijo_lineal(bitacora: _Bitacora, nivel: int, max_nivel: int) -> None:
    info = bitacora.anotar(nivel, hijos=1 if nivel < max_nivel else 0)
    print(f"  Hijo de nivel {nivel}: PID {info.pid}, Padre PID: {info.ppid}")
    print(f"  Creando hijo de nivel {nivel + 1}...")
    _lineal(bitacora, nivel + 1, max_nivel)


def crear_hijos_lineales(max_nivel: int = 3) -> list[InfoProceso]:
    """Fork a line of descendants, one per level; the caller is not recorded."""
    return _recolectar(partial(_lineal, nivel=1, max_nivel=max_nivel))


def generar_grafico(max_nivel: int = 3, pid: int | None = None) -> str:
    """Return a Graphviz description of a linear hierarchy rooted at ``pid``."""
    padre = os.getpid() if pid is None else pid
    lineas = [
        "digraph G {",
        "  rankdir=TB;",
        "  // Nodo raíz",
        f'  "{padre}" [label="Padre PID {padre}"];',
    ]
    lineas.extend(
        f'  "{padre}" -> "{padre + i}" [label="Hijo de nivel {i}"];'
        for i in range(1, max_nivel + 1)
    )
    lineas.append("}")
    return "\n".join(lineas)


def crear_arbol_h(
    script: str = "./script.sh", comando: str | Sequence[str] = ("ls",)
) -> list[InfoProceso]:
    """Fork H1 (with children H11-H13), H2 (runs ``script``) and H3 (execs ``comando``)."""
    argumentos = [comando] if isinstance(comando, str) else list(comando)
    if not argumentos:
        raise ValueError("Se necesita un comando para H3")

    def nieto(bitacora: _Bitacora, numero: int) -> None:
        info = bitacora.anotar(2, nombre=f"H1{numero}")
        print(f"Soy H1{numero} (PID: {info.pid}), creado por mi padre (PID: {info.ppid})")

    def h1(bitacora: _Bitacora) -> None:
        info = bitacora.anotar(1, hijos=3, nombre="H1")
        print(f"Soy el H1 (PID: {info.pid}), creado por mi padre (PID: {info.ppid})")
        _esperar([_bifurcar(partial(nieto, bitacora, k)) for k in range(1, 4)])

    def h2(bitacora: _Bitacora) -> None:
        info = bitacora.anotar(1, nombre="H2")
        print(f"Soy H2 (PID: {info.pid}), creado por mi padre (PID: {info.ppid})")
        sys.stdout.flush()
        subprocess.run(script, shell=True, check=False)

    def h3(bitacora: _Bitacora) -> None:
        info = bitacora.anotar(1, nombre="H3")
        print(f"Soy H3 (PID: {info.pid}), creado por mi padre (PID: {info.ppid})")
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            os.execvp(argumentos[0], argumentos)
        except OSError as error:
            print(f"Error al ejecutar el comando: {error}", file=sys.stderr)
            raise SystemExit(1) from error

    def raiz(bitacora: _Bitacora) -> None:
        bitacora.anotar(0, hijos=3, nombre="Padre")
        _esperar([_bifurcar(partial(tarea, bitacora)) for tarea in (h1, h2, h3)])

    return _recolectar(raiz)


def concurrencia(directorio: str | os.PathLike[str] = "Misdocumentos") -> list[InfoProceso]:
    """Run commands in a child while the parent creates ``directorio``/process."""

    def hijo(bitacora: _Bitacora) -> None:
        info = bitacora.anotar(1, nombre="Hijo")
        print("Proceso hijo del proceso que ejecuta el programa")
        print(f"Hijo - id: {info.pid}")
        print("El id del proceso que ejecuta el programa")
        print(f"Padre - id: {info.ppid}")
        sys.stdout.flush()
        subprocess.run(["echo", "Imprimiendo desde el hijo\n"], check=False)
        subprocess.run(["ls"], check=False)

    def raiz(bitacora: _Bitacora) -> None:
        pid = _bifurcar(partial(hijo, bitacora))
        bitacora.anotar(0, hijos=1, nombre="Padre")
        print(f"PID {pid}")
        print(f"Padre - id: {os.getpid()}")
        ruta = Path(directorio)
        ruta.mkdir(exist_ok=True)
        (ruta / "process").touch()
        _esperar([pid])

    return _recolectar(raiz)