# budget_planner/api/categories.py

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select

from budget_planner.database import get_session
from budget_planner.models.category import Category
from budget_planner.schemas.category import CategoryCreate, CategoryRead

router = APIRouter(prefix="/categories", tags=["categories"])

@router.post("", response_model=CategoryRead)
@router.post("/", response_model=CategoryRead)
def create_category(category_data: CategoryCreate, session: Session = Depends(get_session)):
    exists = session.exec(
        select(Category).where(
            Category.name == category_data.name,
            Category.is_active == True,
        )
    ).first()
    if exists:
        raise HTTPException(status_code=400, detail="Categoría ya existe")

    category = Category(**category_data.model_dump(), is_default=False)
    session.add(category)
    session.commit()
    session.refresh(category)
    return category

@router.get("", response_model=list[CategoryRead])
@router.get("/", response_model=list[CategoryRead])
def list_categories(
    status: str = Query("active"),  # "active", "inactive", "all"
    session: Session = Depends(get_session),
):
    query = select(Category)
    if status == "active":
        query = query.where(Category.is_active == True)
    elif status == "inactive":
        query = query.where(Category.is_active == False)
    # if "all": sin filtro extra

    return session.exec(query.order_by(Category.name)).all()

@router.put("/{category_id}", response_model=CategoryRead)
def update_category(category_id: int, category_data: CategoryCreate, session: Session = Depends(get_session)):
    category = session.get(Category, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Categoría no encontrada")

    for field, value in category_data.model_dump().items():
        setattr(category, field, value)
    category.updated_at = datetime.utcnow()

    session.add(category)
    session.commit()
    session.refresh(category)
    return category

@router.delete("/{category_id}")
def deactivate_category(category_id: int, session: Session = Depends(get_session)):
    """No se borra: las transacciones históricas siguen apuntando a la categoría."""
    category = session.get(Category, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Categoría no encontrada")
    if category.is_default:
        raise HTTPException(status_code=400, detail="No puedes desactivar una categoría por defecto.")

    category.is_active = False
    category.updated_at = datetime.utcnow()
    session.add(category)
    session.commit()
    return {"message": "Categoría desactivada correctamente"}
