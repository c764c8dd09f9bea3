"""
Modelo de datos de una tarea tal como se guarda en tareas.json
"""
from dataclasses import dataclass
from typing import Optional

FORMATO_FECHA = "%d/%m/%Y"

# Estados base, en el orden en que se muestran
ESTADOS_BASE = ("Pendiente", "En curso", "Finalizado", "Cancelado")


@dataclass
class Tarea:
    """
    Una tarea del listado. No tiene id: se identifica por su posición
    en el arreglo del archivo.
    """
    NombreTarea: Optional[str] = None
    FechaVencimiento: Optional[str] = None  # dd/MM/yyyy
    Estado: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        """
        Construye una tarea ignorando mayúsculas en los nombres de campo.
        Lanza ValueError si un campo no es texto ni null.
        """
        campos = {str(k).lower(): v for k, v in data.items()}
        for nombre in ("nombretarea", "fechavencimiento", "estado"):
            valor = campos.get(nombre)
            if valor is not None and not isinstance(valor, str):
                raise ValueError(f"campo {nombre} de tipo {type(valor).__name__}")
        return cls(
            NombreTarea=campos.get("nombretarea"),
            FechaVencimiento=campos.get("fechavencimiento"),
            Estado=campos.get("estado"),
        )

    def to_dict(self):
        return {
            "NombreTarea": self.NombreTarea,
            "FechaVencimiento": self.FechaVencimiento,
            "Estado": self.Estado,
        }


def formatear_fecha(fecha):
    """dd/MM/yyyy con el año siempre en cuatro dígitos"""
    return f"{fecha.day:02d}/{fecha.month:02d}/{fecha.year:04d}"
