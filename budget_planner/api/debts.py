import datetime as dt
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlmodel import Session, select

from budget_planner.database import get_session
from budget_planner.models.category import Category
from budget_planner.models.debt import Debt
from budget_planner.models.enums import TransactionType
from budget_planner.models.transaction import Transaction
from budget_planner.schemas.debt import DebtCreate, DebtPayment, DebtRead
from budget_planner.schemas.transaction import TransactionRead

router = APIRouter(prefix="/debts", tags=["debts"])

EPS = 0.01


def count_debt_transactions(session: Session, debt_id: int) -> int:
    return session.exec(
        select(func.count()).select_from(Transaction).where(Transaction.debt_id == debt_id)
    ).one() or 0


def to_debt_read(session: Session, debt: Debt) -> DebtRead:
    debt_dict = debt.model_dump()
    debt_dict["transactions_count"] = count_debt_transactions(session, debt.id)
    return DebtRead(**debt_dict)


@router.post("/", response_model=DebtRead)
def create_debt(debt_data: DebtCreate, session: Session = Depends(get_session)):
    new_debt = Debt(**debt_data.model_dump())
    session.add(new_debt)
    session.commit()
    session.refresh(new_debt)
    return to_debt_read(session, new_debt)


@router.get("/", response_model=List[DebtRead])
def get_debts(session: Session = Depends(get_session)):
    debts = session.exec(select(Debt).order_by(Debt.created_at)).all()
    return [to_debt_read(session, debt) for debt in debts]


@router.delete("/{debt_id}")
def delete_debt(debt_id: int, session: Session = Depends(get_session)):
    debt = session.get(Debt, debt_id)
    if not debt:
        raise HTTPException(status_code=404, detail="Deuda no encontrada")

    if count_debt_transactions(session, debt_id):
        raise HTTPException(400, "No puedes eliminar esta deuda porque tiene movimientos asociados.")

    session.delete(debt)
    session.commit()
    return {"message": "Deuda eliminada correctamente"}


@router.post("/{debt_id}/pay", response_model=TransactionRead)
def pay_debt(debt_id: int, payment: DebtPayment, session: Session = Depends(get_session)):
    if payment.amount <= 0:
        raise HTTPException(400, "El monto debe ser mayor a cero.")

    debt = session.get(Debt, debt_id)
    if not debt:
        raise HTTPException(404, "Deuda no encontrada")

    pending = debt.original_amount - debt.paid_amount
    if payment.amount - pending > EPS:
        raise HTTPException(
            status_code=400,
            detail=f"El monto a pagar ({payment.amount}) excede el saldo pendiente ({pending}).",
        )

    if payment.category_id is not None and not session.get(Category, payment.category_id):
        raise HTTPException(400, "Categoría inválida")

    tx = Transaction(
        amount=payment.amount,
        type=TransactionType.expense,
        category_id=payment.category_id,
        date=payment.date or dt.datetime.utcnow(),
        description=payment.description or f"Pago de deuda: {debt.name}",
        debt_id=debt.id,
    )
    session.add(tx)

    debt.paid_amount += payment.amount
    if debt.original_amount - debt.paid_amount <= EPS:
        debt.paid_amount = debt.original_amount
        debt.is_paid = True
    debt.updated_at = dt.datetime.utcnow()
    session.add(debt)

    session.commit()
    session.refresh(tx)
    return tx
