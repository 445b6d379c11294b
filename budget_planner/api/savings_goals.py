# budget_planner/api/savings_goals.py

from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from budget_planner.core.dependencies import get_today
from budget_planner.database import get_session
from budget_planner.models.savings_goal import SavingsGoal
from budget_planner.schemas.savings_goal import (
    SavingsGoalContribution,
    SavingsGoalCreate,
    SavingsGoalRead,
    SavingsGoalSummary,
    SavingsGoalUpdate,
)
from budget_planner.utils.savings_goal_helpers import summarize_goals, to_goal_read

router = APIRouter(prefix="/savings-goals", tags=["savings_goals"])


def _get_goal_or_404(session: Session, goal_id: int) -> SavingsGoal:
    goal = session.get(SavingsGoal, goal_id)
    if not goal:
        raise HTTPException(status_code=404, detail="Meta de ahorro no encontrada")
    return goal


@router.post("", response_model=SavingsGoalRead)
@router.post("/", response_model=SavingsGoalRead)
def create_savings_goal(
    goal_data: SavingsGoalCreate,
    session: Session = Depends(get_session),
    today: date = Depends(get_today),
):
    goal = SavingsGoal(**goal_data.model_dump())
    goal.is_completed = goal.current_amount >= goal.target_amount
    session.add(goal)
    session.commit()
    session.refresh(goal)
    return to_goal_read(goal, today)


@router.get("", response_model=SavingsGoalSummary)
@router.get("/", response_model=SavingsGoalSummary)
def list_savings_goals(session: Session = Depends(get_session), today: date = Depends(get_today)):
    """Metas ordenadas por fecha objetivo, con los totales de todas ellas."""
    goals = session.exec(select(SavingsGoal).order_by(SavingsGoal.target_date, SavingsGoal.id)).all()
    return summarize_goals(goals, today)


@router.get("/{goal_id}", response_model=SavingsGoalRead)
def get_savings_goal(goal_id: int, session: Session = Depends(get_session), today: date = Depends(get_today)):
    return to_goal_read(_get_goal_or_404(session, goal_id), today)


@router.put("/{goal_id}", response_model=SavingsGoalRead)
def update_savings_goal(
    goal_id: int,
    goal_data: SavingsGoalUpdate,
    session: Session = Depends(get_session),
    today: date = Depends(get_today),
):
    goal = _get_goal_or_404(session, goal_id)

    for field, value in goal_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(goal, field, value)
    goal.is_completed = goal.current_amount >= goal.target_amount
    goal.updated_at = datetime.utcnow()

    session.add(goal)
    session.commit()
    session.refresh(goal)
    return to_goal_read(goal, today)


@router.delete("/{goal_id}")
def delete_savings_goal(goal_id: int, session: Session = Depends(get_session)):
    goal = _get_goal_or_404(session, goal_id)
    session.delete(goal)
    session.commit()
    return {"message": "Meta de ahorro eliminada correctamente"}


@router.post("/{goal_id}/contribute", response_model=SavingsGoalRead)
def contribute_to_savings_goal(
    goal_id: int,
    contribution: SavingsGoalContribution,
    session: Session = Depends(get_session),
    today: date = Depends(get_today),
):
    """Suma (o resta, si es negativo) al monto ahorrado; la meta se completa al alcanzar el objetivo."""
    if contribution.amount == 0:
        raise HTTPException(400, "El monto debe ser distinto de cero.")

    goal = _get_goal_or_404(session, goal_id)

    new_amount = goal.current_amount + contribution.amount
    if new_amount < 0:
        raise HTTPException(
            status_code=400,
            detail=f"El retiro ({-contribution.amount}) excede lo ahorrado ({goal.current_amount}).",
        )

    goal.current_amount = new_amount
    goal.is_completed = new_amount >= goal.target_amount
    goal.updated_at = datetime.utcnow()

    session.add(goal)
    session.commit()
    session.refresh(goal)
    return to_goal_read(goal, today)
