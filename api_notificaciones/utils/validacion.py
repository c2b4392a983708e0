from typing import List

TITULO_MAX = 50
CONTENIDO_MAX = 500


def es_blanco(valor) -> bool:
    """True si el texto es None, vacío o sólo espacios."""
    return valor is None or not valor.strip()


def validar_creacion(payload) -> List[str]:
    """Valida la forma de una petición de creación.

    Devuelve la lista de mensajes de error en orden fijo (emisor, título,
    contenido, receptores); lista vacía si el payload es válido.
    """
    errores = []
    if payload.emitterId is None:
        errores.append("El ID del emisor no puede ser nulo")

    if es_blanco(payload.title):
        errores.append("El título no puede estar en blanco")
    if payload.title is not None and not 1 <= len(payload.title) <= TITULO_MAX:
        errores.append(f"El título debe tener entre 1 y {TITULO_MAX} caracteres")

    if es_blanco(payload.body):
        errores.append("El contenido no puede estar en blanco")
    if payload.body is not None and not 1 <= len(payload.body) <= CONTENIDO_MAX:
        errores.append(f"El contenido debe tener entre 1 y {CONTENIDO_MAX} caracteres")

    if not payload.receivers:
        errores.append("La lista de receptores no puede estar vacía")
    return errores
