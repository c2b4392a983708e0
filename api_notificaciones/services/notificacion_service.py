import logging
from contextlib import contextmanager
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from ..exceptions import ArgumentoInvalidoError, NotificacionNoEncontradaError
from ..models.notificacion import Notificacion
from ..repositories.notificacion_repository import NotificacionRepository
from ..schemas.notificacion import NotificacionCreate, NotificacionUpdate
from ..utils.validacion import CONTENIDO_MAX, TITULO_MAX, es_blanco

logger = logging.getLogger(__name__)


@contextmanager
def transaccion(db: Session):
    """Commit al salir normalmente, rollback ante cualquier excepción."""
    try:
        yield
        db.commit()
    except Exception:
        db.rollback()
        raise


def _validar_texto(valor: str, maximo: int, msg_blanco: str, msg_longitud: str) -> str:
    if es_blanco(valor):
        raise ArgumentoInvalidoError(msg_blanco)
    if len(valor) > maximo:
        raise ArgumentoInvalidoError(msg_longitud)
    return valor


def create_notificacion(db: Session, data: NotificacionCreate) -> Notificacion:
    """Crea una notificación activa con la fecha actual.

    Título, contenido y emisor ya vienen validados por el router.
    """
    if not data.receivers:
        raise ArgumentoInvalidoError("La lista de receptores no puede estar vacía al crear.")

    repo = NotificacionRepository(db)
    with transaccion(db):
        notificacion = Notificacion(
            id_emisor=data.emitterId,
            titulo_notificacion=data.title,
            contenido_notificacion=data.body,
            receptores=list(data.receivers),
        )
        notificacion.fecha_notificacion = datetime.now()
        notificacion.estado_notificacion = True
        repo.save(notificacion)
    db.refresh(notificacion)
    logger.info("Notificación %s creada por emisor %s (%d receptores)",
                notificacion.id_notificacion, notificacion.id_emisor, len(data.receivers))
    return notificacion


def list_notificaciones(db: Session) -> List[Notificacion]:
    return NotificacionRepository(db).find_all()


def get_notificacion(db: Session, notificacion_id: int) -> Optional[Notificacion]:
    return NotificacionRepository(db).find_by_id(notificacion_id)


def update_notificacion(db: Session, notificacion_id: int, patch: NotificacionUpdate) -> Notificacion:
    """Actualización parcial.

    Sólo se aplican los campos presentes (no null) del patch, validados en
    orden título, contenido, estado, receptores. `emitterId`, `createdAt` e
    `id` nunca se modifican. Si una regla falla no se escribe nada.
    """
    repo = NotificacionRepository(db)
    with transaccion(db):
        existente = repo.find_by_id(notificacion_id)
        if existente is None:
            logger.warning("Actualización de notificación inexistente: %s", notificacion_id)
            raise NotificacionNoEncontradaError(
                f"Notificación no encontrada con ID: {notificacion_id}", notificacion_id
            )

        cambios = {}
        if patch.title is not None:
            cambios['titulo_notificacion'] = _validar_texto(
                patch.title, TITULO_MAX,
                "El título no puede estar en blanco.",
                f"El título debe tener entre 1 y {TITULO_MAX} caracteres.",
            )
        if patch.body is not None:
            cambios['contenido_notificacion'] = _validar_texto(
                patch.body, CONTENIDO_MAX,
                "El contenido no puede estar en blanco.",
                f"El contenido debe tener entre 1 y {CONTENIDO_MAX} caracteres.",
            )
        if patch.active is not None:
            cambios['estado_notificacion'] = patch.active
        if patch.receivers is not None:
            if not patch.receivers:
                raise ArgumentoInvalidoError("La lista de receptores no puede quedar vacía al actualizar.")
            cambios['receptores'] = list(patch.receivers)

        for campo, valor in cambios.items():
            setattr(existente, campo, valor)
        repo.save(existente)
    db.refresh(existente)
    logger.info("Notificación %s actualizada (campos: %s)",
                notificacion_id, ", ".join(cambios) or "ninguno")
    return existente


def delete_notificacion(db: Session, notificacion_id: int) -> None:
    repo = NotificacionRepository(db)
    with transaccion(db):
        if not repo.exists_by_id(notificacion_id):
            logger.warning("Eliminación de notificación inexistente: %s", notificacion_id)
            raise NotificacionNoEncontradaError(
                f"Notificación no encontrada con ID: {notificacion_id} para eliminar.", notificacion_id
            )
        repo.delete_by_id(notificacion_id)
    logger.info("Notificación %s eliminada", notificacion_id)
