"""
Fixtures compartidas.

Cada test usa una base SQLite en memoria (StaticPool para que el TestClient y
las tareas en segundo plano compartan la misma conexión) y una fecha fija
como "hoy".
"""

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import budget_planner.models  # noqa: F401
from budget_planner.core.dependencies import get_snapshot_writer, get_today
from budget_planner.database import get_session
from budget_planner.main import app
from budget_planner.models.category import Category
from budget_planner.models.enums import TransactionType
from budget_planner.models.transaction import Transaction
from budget_planner.utils.snapshot_helpers import SnapshotWriter

TODAY = date(2024, 6, 15)


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="writer")
def writer_fixture():
    return SnapshotWriter()


@pytest.fixture(name="client")
def client_fixture(session, writer):
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_today] = lambda: TODAY
    app.dependency_overrides[get_snapshot_writer] = lambda: writer
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_tx(session):
    """Inserta una transacción directamente en la base."""
    def _add(amount, type_, when, category_id=None, debt_id=None):
        if isinstance(when, date) and not isinstance(when, datetime):
            when = datetime.combine(when, datetime.min.time().replace(hour=12))
        tx = Transaction(
            amount=amount,
            type=TransactionType(type_),
            date=when,
            category_id=category_id,
            debt_id=debt_id,
        )
        session.add(tx)
        session.commit()
        session.refresh(tx)
        return tx
    return _add


@pytest.fixture
def groceries(session):
    category = Category(name="Groceries", monthly_budget=600)
    session.add(category)
    session.commit()
    session.refresh(category)
    return category
