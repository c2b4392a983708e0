from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, TIMESTAMP
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.orm import relationship
from ..database import Base

class NotificacionReceptor(Base):
    __tablename__ = 'notificacion_receptores'

    # clave sustituta: permite receptores duplicados y conserva el orden de inserción
    id = Column(Integer, primary_key=True, autoincrement=True)
    id_notificacion = Column(
        Integer,
        ForeignKey('notificacion_emergencia.id_notificacion', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    id_receptor = Column(Integer, nullable=False)


class Notificacion(Base):
    __tablename__ = 'notificacion_emergencia'

    id_notificacion = Column(Integer, primary_key=True, index=True, autoincrement=True)
    id_emisor = Column(Integer, nullable=False)
    titulo_notificacion = Column(String(50), nullable=False)
    contenido_notificacion = Column(String(500), nullable=False)
    fecha_notificacion = Column(TIMESTAMP, nullable=False)
    estado_notificacion = Column(Boolean, nullable=False, default=True)

    receptores_rel = relationship(
        'NotificacionReceptor',
        order_by=NotificacionReceptor.id,
        cascade='all, delete-orphan',
    )
    # lista de ints; asignar una lista nueva reemplaza todas las filas hijas
    receptores = association_proxy(
        'receptores_rel',
        'id_receptor',
        creator=lambda id_receptor: NotificacionReceptor(id_receptor=id_receptor),
    )

    def __repr__(self):
        return f"<Notificacion id={self.id_notificacion} emisor={self.id_emisor} titulo={self.titulo_notificacion!r}>"
