"""Errores de negocio del servicio de notificaciones.

Cada clase corresponde a un código HTTP; el router es el único que las
traduce a respuestas. Cualquier otra excepción se considera inesperada (500).
"""


class NotificacionError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ArgumentoInvalidoError(NotificacionError):
    """Falla de validación de negocio (400)."""
    status_code = 400


class NotificacionNoEncontradaError(NotificacionError):
    """El ID referenciado no existe (404)."""
    status_code = 404

    def __init__(self, message: str, notificacion_id: int = None):
        super().__init__(message)
        self.notificacion_id = notificacion_id
