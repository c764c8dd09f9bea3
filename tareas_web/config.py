"""
Configuración de la aplicación, leída de variables de entorno
"""
import os


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-tareas")

    # Ruta del archivo JSON; si no se define se usa static/data/tareas.json
    TAREAS_DATA_FILE = os.getenv("TAREAS_DATA_FILE") or None

    # Con Redis configurado, el alta de tareas se serializa entre procesos
    TAREAS_REDIS_URL = os.getenv("TAREAS_REDIS_URL") or None
    TAREAS_LOCK_TIMEOUT = int(os.getenv("TAREAS_LOCK_TIMEOUT", "10"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
