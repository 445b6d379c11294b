from sqlmodel import Session, select

from budget_planner.core.config import DEFAULT_CURRENCY, DEFAULT_FIRST_DAY_OF_MONTH
from budget_planner.models.app_settings import AppSettings


def get_or_create_settings(session: Session) -> AppSettings:
    """
    Devuelve la única fila de ajustes; si no existe la crea con los valores por defecto.
    Idempotente (seguro si se llama varias veces).
    """
    settings = session.exec(select(AppSettings).order_by(AppSettings.id)).first()
    if settings:
        return settings

    settings = AppSettings(currency=DEFAULT_CURRENCY, first_day_of_month=DEFAULT_FIRST_DAY_OF_MONTH)
    session.add(settings)
    session.commit()
    session.refresh(settings)
    return settings


def get_first_day_of_month(session: Session) -> int:
    """Solo lectura: no crea la fila de ajustes si aún no existe."""
    settings = session.exec(select(AppSettings).order_by(AppSettings.id)).first()
    return settings.first_day_of_month if settings else DEFAULT_FIRST_DAY_OF_MONTH
