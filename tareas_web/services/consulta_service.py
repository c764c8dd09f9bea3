"""
Consulta del listado: estados disponibles, filtro por estado,
búsqueda por nombre y paginación. Funciones puras sobre una lista.
"""
import math
from dataclasses import dataclass, field
from typing import List

from tareas_web.models import ESTADOS_BASE, Tarea

TAMANO_PAGINA = 10
FILTRO_TODOS = "todos"
RANGO_OTROS = 99


@dataclass
class ResultadoConsulta:
    tareas: List[Tarea] = field(default_factory=list)
    numero_pagina: int = 1
    total_paginas: int = 1
    estados: List[str] = field(default_factory=list)


def rango_estado(estado):
    """Orden de visualización: estados base en su orden, el resto al final"""
    if estado in ESTADOS_BASE:
        return ESTADOS_BASE.index(estado)
    return RANGO_OTROS


def derivar_estados(tareas):
    """Estados base más los presentes en las tareas, sin duplicados"""
    vistos = set()
    estados = []
    candidatos = list(ESTADOS_BASE) + [(t.Estado or "").strip() for t in tareas]
    for estado in candidatos:
        if not estado or estado.lower() in vistos:
            continue
        vistos.add(estado.lower())
        estados.append(estado)
    # sorted es estable: los empates quedan en orden de aparición
    return sorted(estados, key=rango_estado)


def filtrar_por_estado(tareas, filtro_estado):
    filtro = (filtro_estado or "").strip()
    if not filtro or filtro.lower() == FILTRO_TODOS:
        return list(tareas)
    filtro = filtro.lower()
    return [t for t in tareas if (t.Estado or "").strip().lower() == filtro]


def filtrar_por_texto(tareas, q):
    texto = (q or "").strip().lower()
    if not texto:
        return list(tareas)
    return [
        t for t in tareas
        if t.NombreTarea and t.NombreTarea.strip() and texto in t.NombreTarea.lower()
    ]


def paginar(tareas, numero_pagina=1):
    """Retorna (pagina, numero_pagina efectivo, total_paginas)"""
    total_paginas = max(1, math.ceil(len(tareas) / TAMANO_PAGINA))
    numero_pagina = min(max(1, numero_pagina), total_paginas)
    inicio = (numero_pagina - 1) * TAMANO_PAGINA
    return tareas[inicio:inicio + TAMANO_PAGINA], numero_pagina, total_paginas


def consultar_tareas(tareas, filtro_estado=None, q=None, numero_pagina=1):
    filtradas = filtrar_por_texto(filtrar_por_estado(tareas, filtro_estado), q)
    pagina, numero_pagina, total_paginas = paginar(filtradas, numero_pagina)
    return ResultadoConsulta(
        tareas=pagina,
        numero_pagina=numero_pagina,
        total_paginas=total_paginas,
        estados=derivar_estados(tareas),
    )
