# budget_planner/api/monthly_budgets.py

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select

from budget_planner.database import get_session
from budget_planner.models.category import Category
from budget_planner.models.monthly_budget import MonthlyBudget
from budget_planner.schemas.monthly_budget import MonthlyBudgetRead, MonthlyBudgetUpsert
from budget_planner.utils.budget_helpers import (
    copy_budgets_from_previous_month,
    get_budget_for_category_month,
    rollover_from_previous_month,
)
from budget_planner.utils.settings_helpers import get_first_day_of_month

router = APIRouter(prefix="/monthly-budgets", tags=["monthly_budgets"])


def _to_read(budget: MonthlyBudget, categories: dict) -> MonthlyBudgetRead:
    category = categories.get(budget.category_id)
    return MonthlyBudgetRead(**budget.model_dump(), category_name=category.name if category else None)


@router.put("", response_model=MonthlyBudgetRead)
@router.put("/", response_model=MonthlyBudgetRead)
def set_monthly_budget(data: MonthlyBudgetUpsert, session: Session = Depends(get_session)):
    """
    Crea o actualiza el presupuesto de una categoría para (year, month).
    Al crear la fila se arrastra lo que sobró del mes anterior si ese mes tenía rollover.
    """
    category = session.get(Category, data.category_id)
    if not category:
        raise HTTPException(status_code=400, detail="Categoría inválida")

    budget = get_budget_for_category_month(session, data.category_id, data.year, data.month)

    if budget:
        budget.planned_amount = data.planned_amount
        budget.rollover_enabled = data.rollover_enabled
        budget.updated_at = datetime.utcnow()
    else:
        budget = MonthlyBudget(**data.model_dump())
        budget.rollover_amount = rollover_from_previous_month(
            session, data.category_id, data.year, data.month, get_first_day_of_month(session)
        )

    session.add(budget)
    session.commit()
    session.refresh(budget)
    return MonthlyBudgetRead(**budget.model_dump(), category_name=category.name)


@router.post("/copy-previous", response_model=List[MonthlyBudgetRead])
def copy_previous_month(
    year: int = Query(..., ge=1970, le=9999),
    month: int = Query(..., ge=1, le=12),
    session: Session = Depends(get_session),
):
    """Copia los presupuestos del mes anterior que falten en (year, month); devuelve solo los creados."""
    created = copy_budgets_from_previous_month(session, year, month, get_first_day_of_month(session))
    categories = {c.id: c for c in session.exec(select(Category)).all()}
    return [_to_read(b, categories) for b in created]


@router.get("", response_model=List[MonthlyBudgetRead])
@router.get("/", response_model=List[MonthlyBudgetRead])
def list_monthly_budgets(
    year: int = Query(..., ge=1970, le=9999),
    month: int = Query(..., ge=1, le=12),
    session: Session = Depends(get_session),
):
    """
    Filas del mes y, para las categorías activas sin fila, su presupuesto por defecto
    (is_default=True). Las filas por defecto no cuentan para el puntaje de salud.
    """
    budgets = session.exec(
        select(MonthlyBudget).where(MonthlyBudget.year == year, MonthlyBudget.month == month)
    ).all()
    categories = {c.id: c for c in session.exec(select(Category)).all()}

    result = [_to_read(b, categories) for b in budgets]

    budgeted = {b.category_id for b in budgets}
    for category in categories.values():
        if category.id in budgeted or not category.is_active or category.monthly_budget <= 0:
            continue
        result.append(MonthlyBudgetRead(
            category_id=category.id,
            category_name=category.name,
            year=year,
            month=month,
            planned_amount=category.monthly_budget,
            is_default=True,
        ))

    return result
