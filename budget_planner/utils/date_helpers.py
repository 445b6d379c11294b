from datetime import date, datetime, timedelta
from typing import Tuple


def previous_month(year: int, month: int) -> Tuple[int, int]:
    """Mes calendario anterior (1-12), cruzando el límite de año."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> Tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def get_month_range(year: int, month: int, first_day: int = 1) -> Tuple[datetime, datetime]:
    """
    Devuelve (start, end) del "mes financiero" anclado en `first_day` (1-28).
    El fin es el siguiente ancla menos un microsegundo, así el rango es inclusivo en ambos extremos.
    """
    if not 1 <= first_day <= 28:
        raise ValueError(f"first_day debe estar entre 1 y 28, recibido {first_day!r}")
    if not 1 <= month <= 12:
        raise ValueError(f"month debe estar entre 1 y 12, recibido {month!r}")

    start = datetime(year, month, first_day)
    next_year, next_month_ = next_month(year, month)
    end = datetime(next_year, next_month_, first_day) - timedelta(microseconds=1)
    return start, end


def is_future_month(year: int, month: int, today: date) -> bool:
    """True si (year, month) es posterior al mes calendario de `today`."""
    return (year, month) > (today.year, today.month)
