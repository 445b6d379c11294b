# budget_planner/utils/aggregation_helpers.py

from collections import defaultdict
from typing import Dict, Iterable, Optional

from sqlmodel import Session, select, func

from budget_planner.models.debt import Debt
from budget_planner.models.enums import TransactionType
from budget_planner.models.health_score import HealthScoreSnapshot
from budget_planner.models.monthly_budget import MonthlyBudget
from budget_planner.models.transaction import Transaction
from budget_planner.schemas.health_score import MonthlyHealthScoreRead, MonthlyInputs
from budget_planner.utils.date_helpers import get_month_range, previous_month
from budget_planner.utils.score_helpers import calculate_total_health_score


def get_transactions_between(session: Session, start, end) -> list:
    """Transacciones con fecha en [start, end], inclusivo en ambos extremos."""
    return session.exec(
        select(Transaction)
        .where(Transaction.date >= start)
        .where(Transaction.date <= end)
        .order_by(Transaction.date)
    ).all()


def summarize_lifetime(transactions: Iterable[Transaction], fallback_expenses: float):
    """
    Saldo disponible (ingresos - gastos - flujo neto a ahorro, de toda la historia)
    y gasto mensual promedio sobre los meses calendario que tienen algún gasto.
    """
    total_income = 0.0
    total_expenses = 0.0
    total_savings = 0.0
    months_with_expenses = set()

    for tx in transactions:
        if tx.type == TransactionType.income:
            total_income += tx.amount
        elif tx.type == TransactionType.expense:
            total_expenses += tx.amount
            months_with_expenses.add((tx.date.year, tx.date.month))
        elif tx.type == TransactionType.savings:
            total_savings += tx.amount

    current_balance = total_income - total_expenses - total_savings
    if months_with_expenses:
        avg_monthly_expenses = total_expenses / len(months_with_expenses)
    else:
        avg_monthly_expenses = fallback_expenses  # sin historial, usamos el mes actual
    return current_balance, avg_monthly_expenses


def build_monthly_inputs(session: Session, year: int, month: int, first_day: int = 1) -> MonthlyInputs:
    start, end = get_month_range(year, month, first_day)
    month_txs = get_transactions_between(session, start, end)

    income = 0.0
    expenses = 0.0
    savings = 0.0
    total_debt_paid = 0.0
    daily_spending: Dict[str, float] = defaultdict(float)

    for tx in month_txs:
        if tx.type == TransactionType.income:
            income += tx.amount
        elif tx.type == TransactionType.expense:
            expenses += tx.amount
            daily_spending[tx.date.date().isoformat()] += tx.amount
        elif tx.type == TransactionType.savings:
            savings += tx.amount

        if tx.debt_id is not None:
            total_debt_paid += tx.amount

    # Presupuesto: solo cuentan los gastos de categorías con fila de presupuesto este mes
    budgets = session.exec(
        select(MonthlyBudget).where(MonthlyBudget.year == year, MonthlyBudget.month == month)
    ).all()
    planned_budget = sum(b.planned_amount for b in budgets)
    budgeted_category_ids = {b.category_id for b in budgets}
    spent_budget = sum(
        tx.amount
        for tx in month_txs
        if tx.type == TransactionType.expense and tx.category_id in budgeted_category_ids
    )

    total_debt = session.exec(select(func.sum(Debt.original_amount))).one() or 0.0

    all_txs = session.exec(select(Transaction)).all()
    current_balance, avg_monthly_expenses = summarize_lifetime(all_txs, fallback_expenses=expenses)

    return MonthlyInputs(
        income=income,
        expenses=expenses,
        savings=savings,
        planned_budget=planned_budget,
        spent_budget=spent_budget,
        total_debt=total_debt,
        total_debt_paid=total_debt_paid,
        daily_spending=[daily_spending[day] for day in sorted(daily_spending)],
        current_balance=current_balance,
        avg_monthly_expenses=avg_monthly_expenses,
    )


def get_snapshot(session: Session, year: int, month: int) -> Optional[HealthScoreSnapshot]:
    return session.exec(
        select(HealthScoreSnapshot).where(
            HealthScoreSnapshot.year == year,
            HealthScoreSnapshot.month == month,
        )
    ).first()


def build_monthly_health_score(
    session: Session, year: int, month: int, first_day: int = 1
) -> MonthlyHealthScoreRead:
    """Calcula el puntaje del mes sin escribir nada en la base de datos."""
    inputs = build_monthly_inputs(session, year, month, first_day)
    result = calculate_total_health_score(
        income=inputs.income,
        savings=inputs.savings,
        planned_budget=inputs.planned_budget,
        spent_budget=inputs.spent_budget,
        total_debt=inputs.total_debt,
        total_debt_paid=inputs.total_debt_paid,
        daily_spending=inputs.daily_spending,
        current_balance=inputs.current_balance,
        avg_monthly_expenses=inputs.avg_monthly_expenses,
    )

    prev = get_snapshot(session, *previous_month(year, month))
    return MonthlyHealthScoreRead(
        year=year,
        month=month,
        total_score=result.total_score,
        components=result.components,
        prev_score=prev.total_score if prev else None,
    )
