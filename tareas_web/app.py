"""
Aplicación principal del listado de tareas
"""
import os

from flask import Flask, jsonify, redirect, url_for

from tareas_web.config import Config
from tareas_web.controllers.tareas_controller import tareas_bp
from tareas_web.logging_setup import setup_logging
from tareas_web.services.tareas_service import TareasStore, crear_lock


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config["LOG_LEVEL"])

    data_file = app.config["TAREAS_DATA_FILE"] or os.path.join(app.static_folder, "data", "tareas.json")
    lock = crear_lock(app.config["TAREAS_REDIS_URL"], app.config["TAREAS_LOCK_TIMEOUT"])
    app.extensions["tareas_store"] = TareasStore(data_file, lock=lock)
    app.logger.info("Archivo de tareas: %s", data_file)

    app.register_blueprint(tareas_bp)

    @app.route("/", methods=["GET"])
    def index():
        return redirect(url_for("tareas.listar_tareas"))

    @app.route("/health", methods=["GET"])
    def health():
        """Endpoint de salud"""
        return jsonify({"status": "ok", "service": "tareas-web"}), 200

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000)
