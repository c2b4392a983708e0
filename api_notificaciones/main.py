import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import settings
from .database import engine, Base
from .models import notificacion  # noqa: F401  registra las tablas en Base.metadata
from .routes import notificaciones as notificaciones_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SAFE Rescue - API de Notificaciones",
    description="API REST para gestión de notificaciones de emergencia",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(notificaciones_router.router)


def _format_validation_error(err: dict) -> str:
    loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query")]
    msg = err.get("msg", "valor inválido")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


@app.exception_handler(RequestValidationError)
async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    # errores estructurales (JSON mal formado, tipos incorrectos, id no numérico)
    detail = "; ".join(_format_validation_error(e) for e in exc.errors())
    logger.info("Petición rechazada %s %s: %s", request.method, request.url.path, detail)
    return PlainTextResponse(detail, status_code=400)


@app.exception_handler(Exception)
async def _unexpected_exception_handler(request: Request, exc: Exception):
    # no se devuelve el mensaje original: puede contener detalles de la BD
    logger.exception("Error inesperado en %s %s", request.method, request.url.path)
    return PlainTextResponse("Error interno del servidor", status_code=500)


@app.on_event('startup')
def startup():
    if settings.RUN_MIGRATIONS:
        from .utils.alembic_runner import run_migrations_if_needed
        run_migrations_if_needed()
    else:
        Base.metadata.create_all(bind=engine)
    logger.info("API de notificaciones lista (db=%s)", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
