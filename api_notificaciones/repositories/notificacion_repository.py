from typing import List, Optional
from sqlalchemy import select, exists
from sqlalchemy.orm import Session, selectinload

from ..models.notificacion import Notificacion


class NotificacionRepository:
    """Acceso a datos de `Notificacion`. No contiene reglas de negocio.

    Trabaja sobre la sesión recibida y sólo hace flush; el commit o rollback
    es responsabilidad del servicio.
    """

    def __init__(self, db: Session):
        self.db = db

    def save(self, notificacion: Notificacion) -> Notificacion:
        if not notificacion.id_notificacion:
            self.db.add(notificacion)
        self.db.flush()
        return notificacion

    def find_all(self) -> List[Notificacion]:
        stmt = select(Notificacion).options(selectinload(Notificacion.receptores_rel))
        return list(self.db.scalars(stmt).all())

    def find_by_id(self, notificacion_id: int) -> Optional[Notificacion]:
        return self.db.get(Notificacion, notificacion_id)

    def exists_by_id(self, notificacion_id: int) -> bool:
        stmt = select(exists().where(Notificacion.id_notificacion == notificacion_id))
        return bool(self.db.scalar(stmt))

    def delete_by_id(self, notificacion_id: int) -> None:
        notificacion = self.find_by_id(notificacion_id)
        if notificacion is None:
            return
        self.db.delete(notificacion)
        self.db.flush()
