"""
Servicio de tareas - lectura y escritura del archivo tareas.json
y validación del alta de tareas
"""
import json
import logging
import os
import threading
from datetime import datetime

import redis
from redis.exceptions import RedisError

from tareas_web.models import FORMATO_FECHA, Tarea, formatear_fecha

logger = logging.getLogger(__name__)

LARGO_MAXIMO_NOMBRE = 120

# Formatos aceptados para el campo Fecha del formulario
FORMATOS_FECHA_ENTRADA = ("%Y-%m-%d", FORMATO_FECHA)


class ErrorAlmacenamiento(Exception):
    """No se pudo leer o escribir el archivo de tareas"""


def insertar_al_inicio(tareas, tarea):
    """Orden de guardado: la tarea más nueva va primero"""
    return [tarea] + list(tareas)


class TareasStore:
    """
    Archivo JSON con un arreglo de tareas. Cada llamada a load() vuelve a
    leer el archivo; no hay cache entre requests.
    """

    def __init__(self, data_file, lock=None):
        self.data_file = data_file
        self.lock = lock if lock is not None else threading.Lock()

    def load(self, estricto=False):
        """
        Obtiene todas las tareas. Si el archivo no existe devuelve [].
        Con contenido inválido devuelve [] o, si estricto, lanza
        ErrorAlmacenamiento.
        """
        if not os.path.exists(self.data_file):
            logger.debug("Archivo %s inexistente, listado vacío", self.data_file)
            return []

        try:
            with open(self.data_file, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ErrorAlmacenamiento(f"No se pudo leer {self.data_file}: {e}") from e
        except ValueError as e:
            return self._contenido_invalido(f"JSON inválido: {e}", estricto)

        if not isinstance(data, list):
            return self._contenido_invalido("se esperaba un arreglo", estricto)

        tareas = []
        for posicion, item in enumerate(data):
            if not isinstance(item, dict):
                continue
            try:
                tareas.append(Tarea.from_dict(item))
            except ValueError as e:
                if estricto:
                    raise ErrorAlmacenamiento(
                        f"Contenido inválido en {self.data_file}: tarea {posicion}: {e}"
                    ) from e
                logger.warning("Tarea %d inválida en %s (%s), se omite", posicion, self.data_file, e)
        logger.debug("Leídas %d tareas de %s", len(tareas), self.data_file)
        return tareas

    def _contenido_invalido(self, motivo, estricto):
        if estricto:
            raise ErrorAlmacenamiento(f"Contenido inválido en {self.data_file}: {motivo}")
        logger.warning("Contenido inválido en %s (%s), se trata como vacío", self.data_file, motivo)
        return []

    def save(self, tareas):
        """Sobrescribe el archivo con todas las tareas (indentado)"""
        try:
            os.makedirs(os.path.dirname(os.path.abspath(self.data_file)), exist_ok=True)
            with open(self.data_file, "w", encoding="utf-8") as f:
                json.dump([t.to_dict() for t in tareas], f, indent=4, ensure_ascii=False)
        except OSError as e:
            raise ErrorAlmacenamiento(f"No se pudo escribir {self.data_file}: {e}") from e
        logger.info("Guardadas %d tareas en %s", len(tareas), self.data_file)

    def agregar(self, tarea):
        """Lee, inserta la tarea al inicio y guarda, todo bajo el lock"""
        try:
            with self.lock:
                tareas = insertar_al_inicio(self.load(estricto=True), tarea)
                self.save(tareas)
        except RedisError as e:
            raise ErrorAlmacenamiento(f"No se pudo tomar el lock de tareas: {e}") from e
        return tareas


def crear_lock(redis_url=None, timeout=10):
    """Lock del store: de Redis si hay URL, si no uno local al proceso"""
    if not redis_url:
        return threading.Lock()
    client = redis.Redis.from_url(redis_url)
    return client.lock("tareas:lock", timeout=timeout, blocking_timeout=timeout)


def _parsear_fecha(valor):
    for formato in FORMATOS_FECHA_ENTRADA:
        try:
            return datetime.strptime(valor, formato)
        except ValueError:
            continue
    return None


def validar_nueva_tarea(form):
    """
    Valida los campos del formulario de alta.
    Retorna (tarea, errores); tarea es None si hay errores.
    """
    errores = {}

    nombre = form.get("NombreTarea") or ""
    if not nombre.strip():
        errores["NombreTarea"] = "El nombre de la tarea es obligatorio"
    elif len(nombre) > LARGO_MAXIMO_NOMBRE:
        errores["NombreTarea"] = f"El nombre no puede superar {LARGO_MAXIMO_NOMBRE} caracteres"

    fecha_raw = (form.get("Fecha") or "").strip()
    fecha = None
    if not fecha_raw:
        errores["Fecha"] = "La fecha es obligatoria"
    else:
        fecha = _parsear_fecha(fecha_raw)
        if fecha is None:
            errores["Fecha"] = "La fecha no es válida"

    estado = form.get("Estado") or ""
    if not estado.strip():
        errores["Estado"] = "El estado es obligatorio"

    if errores:
        return None, errores

    return Tarea(
        NombreTarea=nombre.strip(),
        FechaVencimiento=formatear_fecha(fecha),
        Estado=estado,
    ), {}
