"""
Blueprint de tareas: listado paginado y alta desde formulario
"""
import logging

from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for

from tareas_web.services.consulta_service import consultar_tareas
from tareas_web.services.tareas_service import ErrorAlmacenamiento, validar_nueva_tarea

logger = logging.getLogger(__name__)

tareas_bp = Blueprint("tareas", __name__)

CLASES_TAMANO = {"s": "table-sm", "m": "", "l": "table-lg"}


def get_store():
    return current_app.extensions["tareas_store"]


def leer_selecciones():
    """SelectedSize, FilterEstado y Q desde query string o formulario"""
    tamano = request.values.get("SelectedSize", "m")
    if tamano not in CLASES_TAMANO:
        tamano = "m"
    return {
        "SelectedSize": tamano,
        "FilterEstado": request.values.get("FilterEstado") or None,
        "Q": request.values.get("Q") or None,
    }


def render_listado(numero_pagina, selecciones, errores=None, nueva_tarea=None, status=200):
    resultado = consultar_tareas(
        get_store().load(),
        filtro_estado=selecciones["FilterEstado"],
        q=selecciones["Q"],
        numero_pagina=numero_pagina,
    )
    html = render_template(
        "tareas.html",
        resultado=resultado,
        selecciones=selecciones,
        clase_tamano=CLASES_TAMANO[selecciones["SelectedSize"]],
        errores=errores or {},
        nueva_tarea=nueva_tarea or {},
    )
    return html, status


@tareas_bp.route("/tareas", methods=["GET"])
def listar_tareas():
    numero_pagina = request.args.get("pageNumber", 1, type=int)
    return render_listado(numero_pagina, leer_selecciones())


@tareas_bp.route("/tareas/crear", methods=["POST"])
def crear_tarea():
    selecciones = leer_selecciones()
    tarea, errores = validar_nueva_tarea(request.form)

    if errores:
        logger.info("Alta de tarea rechazada: %s", ", ".join(sorted(errores)))
        return render_listado(1, selecciones, errores=errores, nueva_tarea=request.form, status=400)

    get_store().agregar(tarea)
    logger.info("Tarea creada: %s (%s)", tarea.NombreTarea, tarea.Estado)
    flash("Tarea creada correctamente", "ok")

    params = {k: v for k, v in selecciones.items() if v is not None}
    return redirect(url_for("tareas.listar_tareas", pageNumber=1, **params))


@tareas_bp.errorhandler(ErrorAlmacenamiento)
def error_almacenamiento(e):
    logger.error("Error de almacenamiento: %s", e)
    return render_template("error.html", mensaje="No se pudo acceder al archivo de tareas"), 500
