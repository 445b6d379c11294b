from datetime import date
from typing import Callable, List, Mapping, Optional

from budget_planner.schemas.health_score import TrendPoint
from budget_planner.utils.date_helpers import is_future_month
from budget_planner.utils.score_helpers import clamp, round_half_up


def linear_regression(points: List[tuple]):
    """Mínimos cuadrados sobre [(x, y), ...]. Devuelve (slope, intercept)."""
    n = len(points)
    sum_x = sum(x for x, _ in points)
    sum_y = sum(y for _, y in points)
    sum_xy = sum(x * y for x, y in points)
    sum_xx = sum(x * x for x, _ in points)

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x ** 2)
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def build_projection(points: List[tuple]) -> Optional[Callable[[int], int]]:
    if not points:
        return None

    if len(points) == 1:
        constant = round_half_up(points[0][1])
        return lambda month: constant

    slope, intercept = linear_regression(points)
    return lambda month: int(clamp(round_half_up(slope * month + intercept)))


def project_trend(year: int, scores_by_month: Mapping[int, int], today: date) -> List[TrendPoint]:
    """
    Serie de 12 puntos (meses 1-12) para el gráfico anual.

    `scores_by_month` mapea mes -> total_score guardado. Los meses sin dato (o futuros)
    reciben la proyección lineal; el último mes con dato repite su valor real en
    `predicted` para que la línea proyectada arranque sin hueco.
    """
    points = sorted((month, score) for month, score in scores_by_month.items() if 1 <= month <= 12)
    predict = build_projection(points)
    last_actual_month = points[-1][0] if points else None

    trend = []
    for month in range(1, 13):
        actual = scores_by_month.get(month)
        is_future = is_future_month(year, month, today)

        predicted = None
        if (actual is None or is_future) and predict is not None:
            predicted = predict(month)
        if month == last_actual_month:
            predicted = actual

        trend.append(TrendPoint(month=month, actual=actual, predicted=predicted, is_future=is_future))
    return trend
