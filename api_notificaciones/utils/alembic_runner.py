import os
import logging
from alembic.config import Config
from alembic import command

from ..config import settings

logger = logging.getLogger("alembic_runner")


def run_migrations_if_needed(alembic_ini_path: str = None):
    """Run `alembic upgrade head` using the provided alembic.ini path or the project default.

    Errors are logged, not raised, so a failed migration does not prevent the
    API from starting.
    """
    try:
        if alembic_ini_path is None:
            project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
            alembic_ini_path = os.path.join(project_root, 'alembic.ini')

        if not os.path.exists(alembic_ini_path):
            logger.info(f"alembic.ini not found at {alembic_ini_path}; skipping automatic migrations")
            return

        cfg = Config(alembic_ini_path)
        cfg.set_main_option("script_location", os.path.join(os.path.dirname(alembic_ini_path), "alembic"))
        cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL.replace("%", "%%"))
        logger.info("Running alembic upgrade head...")
        command.upgrade(cfg, 'head')
        logger.info("Alembic upgrade head finished")
    except Exception as e:
        logger.exception(f"Failed to run alembic migrations automatically: {e}")
        return
