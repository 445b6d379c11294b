import logging

from budget_planner.core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configura el logging raíz de la aplicación (se llama una vez en el lifespan)."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    # SQLAlchemy ya imprime sus queries con SQL_ECHO, no duplicamos
    logging.getLogger("sqlalchemy.engine").propagate = False
