# estructuras

Colección de estructuras de datos clásicas y de ejemplos de jerarquías de
procesos, pensada para estudiar cómo funcionan por dentro.

## Instalación

```
pip install .
```

Para ejecutar las pruebas:

```
pip install ".[test]"
pytest
```

## Qué contiene

Registros comunes (`estructuras.registro`):

- `Registro`: dataclass con un identificador `i` y un entero `valor`.
- `valor_aleatorio(rng=None)`: entero pseudoaleatorio entre 0 y 99.
- `EstructuraVaciaError`: se lanza al sacar, consultar o eliminar en una
  estructura vacía.

Listas:

- `estructuras.enlazada`: `ListaEnlazada` (inserción al final) y
  `ListaOrdenada` (inserción ordenada por `valor`). Ambas ofrecen
  `insertar`, `eliminar(i)`, `modificar(i, rng)`, `consultar(i)` y `tabla()`,
  que muestra cada registro con la dirección de su nodo.
- `estructuras.doble`: `ListaReversible`, que además se recorre al revés con
  `reversed()`, y `ListaDoble`, con los ordenamientos por `valor`
  `burbuja`, `seleccion`, `insercion`, `shell_sort`, `quicksort`,
  `cocktail_shaker` y `merge_sort`.
- `estructuras.prioridad`: `ListaPrioridad`, ordenada de mayor a menor
  prioridad; `eliminar()` quita y devuelve `(dato, prioridad)` de la cabeza.
- `estructuras.tad`: `Lista`, un tipo abstracto de lista con
  `insertar_inicio`, `insertar_final`, `eliminar` (lanza `ValueError` si el
  elemento no está), `buscar` y `limpiar`.
- `estructuras.lista_de_listas`: `ListaDeListas`, listas internas de enteros
  direccionadas por posición.
- `estructuras.personas`: `Persona` y `ListaPersonas`, con eliminación por
  posición.
- `estructuras.grafo`: `Grafo` no dirigido con listas de adyacencia
  (5 vértices por defecto); cada vértice guarda primero el vecino añadido más
  recientemente.

Pilas:

- `estructuras.lifo`: `Pila`, con `push`, `pop`, `peek`, `esta_vacia` y
  `tabla`.
- `estructuras.pila_circular`: `PilaCircular` de capacidad fija (5 por
  defecto). Los registros salen en el mismo orden en que entraron; al
  llenarse, `push` lanza `OverflowError`.
- `estructuras.pila_prioridad`: `PilaPrioridad` de `ElementoPrioridad`; la
  cima es siempre el elemento de mayor prioridad.
- `estructuras.pila_multiple`: `PilaMultiple`, varias pilas de enteros
  (3 por defecto) que se reparten a partes iguales una capacidad total
  (30 por defecto).
- `estructuras.pila_reversible`: `PilaReversible`, que puede invertirse con
  `revertir()`.

Procesos (`estructuras.procesos`): funciones que crean jerarquías de procesos
hijos con `fork` y devuelven los `InfoProceso` (nivel, pid, ppid, número de
hijos y nombre) que anotó cada proceso, ordenados por nivel:
`mostrar_pids`, `crear_cadena`, `crear_arbol_balanceado`,
`crear_hijos_aleatorios`, `crear_hijos_bifurcados` y `crear_hijos_lineales`.
`crear_arbol_h` lanza un script con la shell en un hijo y ejecuta un comando
(`ls` por defecto) en otro; `concurrencia` ejecuta `echo` y `ls` en el hijo
mientras el padre crea `Misdocumentos/process`. `generar_grafico` devuelve
una descripción en formato DOT de una jerarquía lineal.

## Ejemplo

```python
from estructuras.tad import Lista
from estructuras.prioridad import ListaPrioridad

lista = Lista()
lista.insertar_inicio(10)
lista.insertar_inicio(20)
lista.insertar_final(30)
print(list(lista))        # [20, 10, 30]
lista.eliminar(20)
print(list(lista))        # [10, 30]

cola = ListaPrioridad()
cola.insertar(10, 2)
cola.insertar(20, 1)
cola.insertar(30, 3)
print(cola.eliminar())    # (30, 3)
print(cola)
```

## Comandos

- `estructuras`: menú interactivo sobre una `Pila` (insertar, eliminar,
  consultar la cima, imprimir y ver la longitud). `--semilla N` fija los
  valores aleatorios; `--prueba` sólo lee un número entero y lo muestra.
- `estructuras-tad`: demostración de la `Lista` del tipo abstracto.
- `estructuras-prioridad`: demostración de la `ListaPrioridad`.

## Limitaciones

- El módulo `estructuras.procesos` necesita un sistema POSIX: usa `fork` y
  `fcntl`, que no existen en Windows.
- El único menú interactivo es el de la pila; las demás estructuras se usan
  desde Python.