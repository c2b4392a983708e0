# api_notificaciones/schemas/notificacion.py
from pydantic import BaseModel, Field, AliasChoices
from typing import Optional, List
from datetime import datetime

class NotificacionCreate(BaseModel):
    """Schema para crear una notificación.

    Todos los campos son opcionales a nivel de tipo: las reglas de presencia y
    longitud las aplica `validar_creacion` para poder devolver todos los
    mensajes juntos. También acepta los nombres de campo del servicio anterior.
    """
    emitterId: Optional[int] = Field(None, validation_alias=AliasChoices('emitterId', 'idEmisor'))
    title: Optional[str] = Field(None, validation_alias=AliasChoices('title', 'tituloNotificacion'))
    body: Optional[str] = Field(None, validation_alias=AliasChoices('body', 'contenidoNotificacion'))
    receivers: Optional[List[int]] = Field(None, validation_alias=AliasChoices('receivers', 'receptores'))

class NotificacionUpdate(BaseModel):
    """Schema para actualización parcial; un campo ausente o null no se modifica."""
    title: Optional[str] = Field(None, validation_alias=AliasChoices('title', 'tituloNotificacion'))
    body: Optional[str] = Field(None, validation_alias=AliasChoices('body', 'contenidoNotificacion'))
    active: Optional[bool] = Field(None, validation_alias=AliasChoices('active', 'estadoNotificacion'))
    receivers: Optional[List[int]] = Field(None, validation_alias=AliasChoices('receivers', 'receptores'))

class NotificacionResponse(BaseModel):
    """Schema de respuesta de notificación"""
    id: int
    emitterId: int
    title: str
    body: str
    createdAt: datetime
    active: bool
    receivers: List[int]
