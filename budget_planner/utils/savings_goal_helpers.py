# budget_planner/utils/savings_goal_helpers.py

import math
from datetime import date
from typing import Iterable

from budget_planner.models.savings_goal import SavingsGoal
from budget_planner.schemas.savings_goal import SavingsGoalRead, SavingsGoalSummary

DAYS_PER_MONTH = 30


def calculate_goal_progress(goal: SavingsGoal, today: date) -> dict:
    """
    Avance de una meta a la fecha `today`.
    El aporte mensual requerido reparte lo que falta entre los meses (de 30 días)
    que quedan; si la fecha ya pasó, se pide todo lo que falta.
    """
    progress = (goal.current_amount / goal.target_amount) * 100 if goal.target_amount > 0 else 0.0
    remaining = goal.target_amount - goal.current_amount

    days_remaining = (goal.target_date - today).days
    months_remaining = max(0, math.ceil(days_remaining / DAYS_PER_MONTH))
    required_monthly = remaining / months_remaining if months_remaining > 0 else remaining

    return dict(
        progress=min(100.0, max(0.0, progress)),
        remaining=remaining,
        days_remaining=days_remaining,
        months_remaining=months_remaining,
        required_monthly=required_monthly,
        on_track=goal.monthly_contribution >= required_monthly or goal.is_completed,
    )


def to_goal_read(goal: SavingsGoal, today: date) -> SavingsGoalRead:
    return SavingsGoalRead(**goal.model_dump(), **calculate_goal_progress(goal, today))


def summarize_goals(goals: Iterable[SavingsGoal], today: date) -> SavingsGoalSummary:
    goals = list(goals)
    total_target = sum(g.target_amount for g in goals)
    total_saved = sum(g.current_amount for g in goals)

    return SavingsGoalSummary(
        goals=[to_goal_read(g, today) for g in goals],
        total_target=total_target,
        total_saved=total_saved,
        total_remaining=total_target - total_saved,
        overall_progress=(total_saved / total_target) * 100 if total_target > 0 else 0.0,
    )
