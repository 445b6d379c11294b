from budget_planner.models.app_settings import AppSettings
from budget_planner.models.category import Category
from budget_planner.models.debt import Debt
from budget_planner.models.health_score import HealthScoreSnapshot
from budget_planner.models.monthly_budget import MonthlyBudget
from budget_planner.models.savings_goal import SavingsGoal
from budget_planner.models.transaction import Transaction

__all__ = [
    "AppSettings",
    "Category",
    "Debt",
    "HealthScoreSnapshot",
    "MonthlyBudget",
    "SavingsGoal",
    "Transaction",
]
