from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware

from budget_planner.api import (
    app_settings,
    categories,
    debts,
    health_score,
    monthly_budgets,
    savings_goals,
    transactions,
)
from budget_planner.core.config import CORS_ORIGINS
from budget_planner.core.logging import configure_logging
from budget_planner.database import create_db_and_tables

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    create_db_and_tables()
    yield

app = FastAPI(title="Budget Planner", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(transactions.router)
app.include_router(categories.router)
app.include_router(debts.router)
app.include_router(monthly_budgets.router)
app.include_router(savings_goals.router)
app.include_router(app_settings.router)
app.include_router(health_score.router)

@app.get("/")
def root():
    return {"message": "Servidor de presupuesto personal"}
