# budget_planner/utils/budget_helpers.py

from typing import Optional

from sqlmodel import Session, select, func

from budget_planner.models.enums import TransactionType
from budget_planner.models.monthly_budget import MonthlyBudget
from budget_planner.models.transaction import Transaction
from budget_planner.utils.date_helpers import get_month_range, previous_month


def get_budget_for_category_month(session: Session, category_id: int, year: int, month: int) -> Optional[MonthlyBudget]:
    return session.exec(
        select(MonthlyBudget).where(
            MonthlyBudget.category_id == category_id,
            MonthlyBudget.year == year,
            MonthlyBudget.month == month,
        )
    ).first()


def get_category_spent(session: Session, category_id: int, year: int, month: int, first_day: int = 1) -> float:
    """Gasto de la categoría dentro del mes financiero (year, month)."""
    start, end = get_month_range(year, month, first_day)
    spent = session.exec(
        select(func.sum(Transaction.amount)).where(
            Transaction.type == TransactionType.expense,
            Transaction.category_id == category_id,
            Transaction.date >= start,
            Transaction.date <= end,
        )
    ).one()
    return float(spent or 0.0)


def calculate_rollover(session: Session, previous: Optional[MonthlyBudget], first_day: int = 1) -> float:
    """
    Lo que sobró del presupuesto anterior: max(0, planeado - gastado).
    Solo aplica si esa fila tenía el rollover activado.
    """
    if previous is None or not previous.rollover_enabled:
        return 0.0
    spent = get_category_spent(session, previous.category_id, previous.year, previous.month, first_day)
    return max(0.0, previous.planned_amount - spent)


def rollover_from_previous_month(session: Session, category_id: int, year: int, month: int, first_day: int = 1) -> float:
    prev_year, prev_month = previous_month(year, month)
    previous = get_budget_for_category_month(session, category_id, prev_year, prev_month)
    return calculate_rollover(session, previous, first_day)


def copy_budgets_from_previous_month(session: Session, year: int, month: int, first_day: int = 1) -> list:
    """
    Copia al mes (year, month) las filas del mes anterior que aún no existen,
    con su rollover calculado. Las filas ya presentes no se tocan.
    """
    prev_year, prev_month = previous_month(year, month)
    previous_budgets = session.exec(
        select(MonthlyBudget).where(MonthlyBudget.year == prev_year, MonthlyBudget.month == prev_month)
    ).all()

    created = []
    for previous in previous_budgets:
        if get_budget_for_category_month(session, previous.category_id, year, month):
            continue
        budget = MonthlyBudget(
            category_id=previous.category_id,
            year=year,
            month=month,
            planned_amount=previous.planned_amount,
            rollover_enabled=previous.rollover_enabled,
            rollover_amount=calculate_rollover(session, previous, first_day),
        )
        session.add(budget)
        created.append(budget)

    session.commit()
    for budget in created:
        session.refresh(budget)
    return created
