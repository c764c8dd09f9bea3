import json

import pytest

from tareas_web.app import create_app
from tareas_web.models import Tarea
from tareas_web.services.tareas_service import TareasStore


def hacer_tareas(n, estado="Pendiente"):
    return [Tarea(f"Tarea {i}", "01/01/2026", estado) for i in range(n)]


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "data" / "tareas.json"


@pytest.fixture()
def escribir_json(data_file):
    def _escribir(contenido):
        data_file.parent.mkdir(parents=True, exist_ok=True)
        if not isinstance(contenido, str):
            contenido = json.dumps(contenido, indent=4, ensure_ascii=False)
        data_file.write_text(contenido, encoding="utf-8")
    return _escribir


@pytest.fixture()
def store(data_file):
    return TareasStore(str(data_file))


@pytest.fixture()
def app(data_file):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "TAREAS_DATA_FILE": str(data_file),
        "TAREAS_REDIS_URL": None,
    })
    return app


@pytest.fixture()
def client(app):
    return app.test_client()
