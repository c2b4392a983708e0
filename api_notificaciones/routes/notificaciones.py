from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from typing import List
from ..database import get_db
from ..exceptions import NotificacionError
from ..models.notificacion import Notificacion
from ..schemas.notificacion import NotificacionCreate, NotificacionUpdate, NotificacionResponse
from ..services.notificacion_service import (
    create_notificacion,
    list_notificaciones,
    get_notificacion,
    update_notificacion,
    delete_notificacion,
)
from ..utils.validacion import validar_creacion

router = APIRouter(prefix="/api-notificaciones/v1/notificaciones", tags=["notificaciones"])


def _to_response(n: Notificacion) -> NotificacionResponse:
    return NotificacionResponse(
        id=n.id_notificacion,
        emitterId=n.id_emisor,
        title=n.titulo_notificacion,
        body=n.contenido_notificacion,
        createdAt=n.fecha_notificacion,
        active=bool(n.estado_notificacion),
        receivers=list(n.receptores),
    )


def _error_response(e: NotificacionError) -> PlainTextResponse:
    return PlainTextResponse(str(e), status_code=e.status_code)


@router.post("", response_model=NotificacionResponse, status_code=status.HTTP_201_CREATED)
def post_notificacion(payload: NotificacionCreate, db: Session = Depends(get_db)):
    """Crear una notificación de emergencia (activa, con fecha actual).

    Errores de validación -> 400 con los mensajes unidos por "; ".
    """
    errores = validar_creacion(payload)
    if errores:
        return PlainTextResponse("; ".join(errores), status_code=status.HTTP_400_BAD_REQUEST)
    try:
        n = create_notificacion(db, payload)
    except NotificacionError as e:
        return _error_response(e)
    return _to_response(n)


@router.get("", response_model=List[NotificacionResponse])
def list_all(db: Session = Depends(get_db)):
    return [_to_response(n) for n in list_notificaciones(db)]


@router.get("/{notificacion_id}", response_model=NotificacionResponse)
def get_one(notificacion_id: int, db: Session = Depends(get_db)):
    n = get_notificacion(db, notificacion_id)
    if n is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return _to_response(n)


# PATCH es el verbo canónico; PUT se mantiene por compatibilidad con la misma semántica parcial
@router.api_route("/{notificacion_id}", methods=["PATCH", "PUT"], response_model=NotificacionResponse)
def patch_notificacion(notificacion_id: int, payload: NotificacionUpdate, db: Session = Depends(get_db)):
    try:
        n = update_notificacion(db, notificacion_id, payload)
    except NotificacionError as e:
        return _error_response(e)
    return _to_response(n)


@router.delete("/{notificacion_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_notificacion(notificacion_id: int, db: Session = Depends(get_db)):
    try:
        delete_notificacion(db, notificacion_id)
    except NotificacionError as e:
        return _error_response(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
