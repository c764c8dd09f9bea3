"""
Listado de tareas: página Flask con filtro, búsqueda, paginación y alta
de tareas guardadas en un archivo JSON.
"""
