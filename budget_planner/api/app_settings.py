from datetime import datetime

from fastapi import APIRouter, Depends
from sqlmodel import Session

from budget_planner.database import get_session
from budget_planner.schemas.app_settings import AppSettingsRead, AppSettingsUpdate
from budget_planner.utils.settings_helpers import get_or_create_settings

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=AppSettingsRead)
@router.get("/", response_model=AppSettingsRead)
def read_settings(session: Session = Depends(get_session)):
    return get_or_create_settings(session)


@router.put("", response_model=AppSettingsRead)
@router.put("/", response_model=AppSettingsRead)
def update_settings(data: AppSettingsUpdate, session: Session = Depends(get_session)):
    settings = get_or_create_settings(session)

    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(settings, field, value)
    settings.updated_at = datetime.utcnow()

    session.add(settings)
    session.commit()
    session.refresh(settings)
    return settings
