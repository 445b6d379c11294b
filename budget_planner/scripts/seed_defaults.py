import logging

from sqlmodel import Session, select

from budget_planner.constants.categories import DEFAULT_CATEGORIES
from budget_planner.core.logging import configure_logging
from budget_planner.database import create_db_and_tables, engine
from budget_planner.models.category import Category
from budget_planner.utils.settings_helpers import get_or_create_settings

logger = logging.getLogger(__name__)


def seed_defaults(session: Session) -> int:
    """Crea las categorías por defecto que falten y la fila de ajustes. Devuelve cuántas categorías creó."""
    created = 0
    for cat in DEFAULT_CATEGORIES:
        existing = session.exec(select(Category).where(Category.name == cat["name"])).first()
        if not existing:
            session.add(Category(**cat, is_default=True))
            logger.info("Creada categoría %s", cat["name"])
            created += 1
    session.commit()

    get_or_create_settings(session)
    return created


if __name__ == "__main__":
    configure_logging()
    create_db_and_tables()
    with Session(engine) as session:
        total = seed_defaults(session)
    logger.info("Seed completado: %d categorías nuevas.", total)
