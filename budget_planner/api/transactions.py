import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select

from budget_planner.database import get_session
from budget_planner.models.category import Category
from budget_planner.models.debt import Debt
from budget_planner.models.enums import TransactionType
from budget_planner.models.transaction import Transaction
from budget_planner.schemas.transaction import TransactionCreate, TransactionRead

router = APIRouter(prefix="/transactions", tags=["transactions"])


def validate_transaction(session: Session, data: TransactionCreate) -> None:
    if data.type == TransactionType.savings:
        # En ahorro el signo es la dirección (depósito / retiro)
        if data.amount == 0:
            raise HTTPException(status_code=400, detail="El monto no puede ser cero.")
        if data.category_id is not None:
            raise HTTPException(status_code=400, detail="Los movimientos de ahorro no llevan categoría.")
    elif data.amount <= 0:
        raise HTTPException(status_code=400, detail="El monto debe ser mayor a cero.")

    if data.category_id is not None:
        category = session.get(Category, data.category_id)
        if not category or not category.is_active:
            raise HTTPException(status_code=400, detail="Categoría inválida")

    if data.debt_id is not None:
        if data.type != TransactionType.expense:
            raise HTTPException(status_code=400, detail="Solo un gasto puede abonar a una deuda.")
        if not session.get(Debt, data.debt_id):
            raise HTTPException(status_code=400, detail="Deuda inválida")


@router.post("", response_model=TransactionRead)
@router.post("/", response_model=TransactionRead)
def create_transaction(transaction_data: TransactionCreate, session: Session = Depends(get_session)):
    validate_transaction(session, transaction_data)

    tx = Transaction(**transaction_data.model_dump(exclude={"date"}), date=transaction_data.date or dt.datetime.utcnow())
    session.add(tx)

    if tx.debt_id is not None:
        debt = session.get(Debt, tx.debt_id)
        debt.paid_amount += tx.amount
        debt.is_paid = debt.paid_amount >= debt.original_amount
        debt.updated_at = dt.datetime.utcnow()
        session.add(debt)

    session.commit()
    session.refresh(tx)
    return tx


@router.get("", response_model=List[TransactionRead])
@router.get("/", response_model=List[TransactionRead])
def list_transactions(
    start_date: Optional[dt.date] = Query(None),
    end_date: Optional[dt.date] = Query(None),
    type: Optional[TransactionType] = Query(None),
    category_id: Optional[int] = Query(None),
    debt_id: Optional[int] = Query(None),
    session: Session = Depends(get_session),
):
    """Filtra por rango de fechas (inclusivo en ambos extremos) y por igualdad de campos."""
    query = select(Transaction)
    if start_date:
        query = query.where(Transaction.date >= dt.datetime.combine(start_date, dt.time.min))
    if end_date:
        query = query.where(Transaction.date <= dt.datetime.combine(end_date, dt.time.max))
    if type:
        query = query.where(Transaction.type == type)
    if category_id is not None:
        query = query.where(Transaction.category_id == category_id)
    if debt_id is not None:
        query = query.where(Transaction.debt_id == debt_id)

    return session.exec(query.order_by(Transaction.date.desc())).all()


@router.delete("/{transaction_id}")
def delete_transaction(transaction_id: int, session: Session = Depends(get_session)):
    tx = session.get(Transaction, transaction_id)
    if not tx:
        raise HTTPException(status_code=404, detail="Transacción no encontrada")

    # Revertir el abono si era un pago de deuda
    if tx.debt_id is not None:
        debt = session.get(Debt, tx.debt_id)
        if debt:
            debt.paid_amount = max(0.0, debt.paid_amount - tx.amount)
            debt.is_paid = debt.paid_amount >= debt.original_amount
            debt.updated_at = dt.datetime.utcnow()
            session.add(debt)

    session.delete(tx)
    session.commit()
    return {"message": "Transacción eliminada correctamente"}
