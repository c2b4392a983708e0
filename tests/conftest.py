import os
import tempfile

import pytest

# debe definirse antes de importar api_notificaciones (settings y engine se crean al importar)
_tmpdir = tempfile.mkdtemp(prefix="api_notificaciones_")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_tmpdir, "test.db")

from api_notificaciones.database import Base, engine, SessionLocal  # noqa: E402
from api_notificaciones.models import notificacion  # noqa: E402,F401


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
