"""
Componentes del puntaje de salud financiera.

Cada función es pura: recibe agregados del mes y devuelve un ComponentScore
con `score` en [0, 100], el `value` crudo para mostrar y una descripción.
"""
import math
from typing import Sequence

from budget_planner.schemas.health_score import ComponentScore, HealthScoreComponents, HealthScoreResult

SAVINGS_RATE_WEIGHT = 0.30
BUDGET_ADHERENCE_WEIGHT = 0.25
DEBT_PROGRESS_WEIGHT = 0.20
SPENDING_STABILITY_WEIGHT = 0.15
EMERGENCY_FUND_WEIGHT = 0.10

# 6 meses cubiertos ~ 100 puntos. Se mantiene 16.6 (no 100/6).
EMERGENCY_FUND_POINTS_PER_MONTH = 16.6


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(high, max(low, value))


def round_half_up(value: float) -> int:
    """Redondeo al entero más cercano, .5 hacia arriba (round() de Python usa bankers)."""
    return int(math.floor(value + 0.5))


def calculate_savings_rate(income: float, savings: float) -> ComponentScore:
    """20% de los ingresos ahorrados = 100 puntos. Sin ingresos el puntaje es 0."""
    rate = savings / income if income > 0 else 0.0
    return ComponentScore(
        score=clamp(rate * 500),
        value=rate * 100,
        label="Tasa de ahorro",
        description=f"Ahorraste {rate * 100:.1f}% de tus ingresos.",
    )


def calculate_budget_adherence(planned: float, spent: float) -> ComponentScore:
    if planned == 0:
        return ComponentScore(
            score=100.0, value=0.0, label="Cumplimiento del presupuesto",
            description="No hay presupuestos para este mes.",
        )

    overspend = max(0.0, spent - planned)
    if overspend == 0:
        description = "Te mantuviste dentro del presupuesto."
    else:
        description = f"Superaste tu presupuesto por {overspend:.2f} ({overspend / planned * 100:.1f}%)."

    return ComponentScore(
        score=clamp(100 - overspend / planned * 100),
        value=spent / planned * 100,
        label="Cumplimiento del presupuesto",
        description=description,
    )


def calculate_debt_progress(total_debt: float, total_paid: float) -> ComponentScore:
    """Abonar 2% de la deuda total en el mes = 100 puntos."""
    if total_debt == 0:
        return ComponentScore(
            score=100.0, value=0.0, label="Progreso de deudas",
            description="¡No tienes deudas pendientes!",
        )

    reduction_rate = total_paid / total_debt
    return ComponentScore(
        score=clamp(reduction_rate * 5000),
        value=reduction_rate * 100,
        label="Progreso de deudas",
        description=f"Redujiste tu deuda en {reduction_rate * 100:.2f}% este mes.",
    )


def calculate_spending_stability(daily_spending: Sequence[float]) -> ComponentScore:
    """Coeficiente de variación del gasto diario (varianza poblacional). CV >= 1 da 0 puntos."""
    if len(daily_spending) < 2:
        return ComponentScore(
            score=100.0, value=0.0, label="Estabilidad del gasto",
            description="No hay suficientes datos de gasto diario.",
        )

    n = len(daily_spending)
    mean = sum(daily_spending) / n
    if mean == 0:
        return ComponentScore(
            score=100.0, value=0.0, label="Estabilidad del gasto",
            description="Sin gasto relevante este mes.",
        )

    variance = sum((x - mean) ** 2 for x in daily_spending) / n
    cv = math.sqrt(variance) / mean
    return ComponentScore(
        score=clamp(100 - cv * 100),
        value=cv,
        label="Estabilidad del gasto",
        description=f"Tu gasto diario varía {cv * 100:.1f}% respecto al promedio.",
    )


def calculate_emergency_fund(current_balance: float, avg_monthly_expenses: float) -> ComponentScore:
    if avg_monthly_expenses == 0:
        return ComponentScore(
            score=100.0, value=0.0, label="Fondo de emergencia",
            description="No hay gastos registrados para calcular la meta.",
        )

    months_covered = current_balance / avg_monthly_expenses
    return ComponentScore(
        score=clamp(months_covered * EMERGENCY_FUND_POINTS_PER_MONTH),
        value=months_covered,
        label="Fondo de emergencia",
        description=f"Tu saldo cubre {months_covered:.1f} meses de gastos.",
    )


def aggregate_health_score(components: HealthScoreComponents) -> int:
    """Suma ponderada de los cinco componentes; se redondea una sola vez al final."""
    weighted = (
        components.savings_rate.score * SAVINGS_RATE_WEIGHT
        + components.budget_adherence.score * BUDGET_ADHERENCE_WEIGHT
        + components.debt_progress.score * DEBT_PROGRESS_WEIGHT
        + components.spending_stability.score * SPENDING_STABILITY_WEIGHT
        + components.emergency_fund.score * EMERGENCY_FUND_WEIGHT
    )
    return int(clamp(round_half_up(weighted)))


def calculate_total_health_score(
    income: float,
    savings: float,
    planned_budget: float,
    spent_budget: float,
    total_debt: float,
    total_debt_paid: float,
    daily_spending: Sequence[float],
    current_balance: float,
    avg_monthly_expenses: float,
) -> HealthScoreResult:
    components = HealthScoreComponents(
        savings_rate=calculate_savings_rate(income, savings),
        budget_adherence=calculate_budget_adherence(planned_budget, spent_budget),
        debt_progress=calculate_debt_progress(total_debt, total_debt_paid),
        spending_stability=calculate_spending_stability(daily_spending),
        emergency_fund=calculate_emergency_fund(current_balance, avg_monthly_expenses),
    )
    return HealthScoreResult(total_score=aggregate_health_score(components), components=components)
