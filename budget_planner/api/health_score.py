# budget_planner/api/health_score.py

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query
from sqlmodel import Session, select

from budget_planner.core.dependencies import get_snapshot_writer, get_today
from budget_planner.database import get_session
from budget_planner.models.health_score import HealthScoreSnapshot
from budget_planner.schemas.health_score import HealthScoreSnapshotRead, MonthlyHealthScoreRead, TrendPoint
from budget_planner.utils.aggregation_helpers import build_monthly_health_score
from budget_planner.utils.date_helpers import is_future_month
from budget_planner.utils.settings_helpers import get_first_day_of_month
from budget_planner.utils.snapshot_helpers import SnapshotWriter, to_snapshot_read
from budget_planner.utils.trend_helpers import project_trend

router = APIRouter(prefix="/health-score", tags=["health_score"])


@router.get("", response_model=MonthlyHealthScoreRead)
@router.get("/", response_model=MonthlyHealthScoreRead)
def get_health_score(
    background_tasks: BackgroundTasks,
    year: Optional[int] = Query(None, ge=1970, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    session: Session = Depends(get_session),
    today: date = Depends(get_today),
    writer: SnapshotWriter = Depends(get_snapshot_writer),
):
    """
    Puntaje de salud financiera del mes (por defecto el mes actual).
    El guardado del snapshot se agenda para después de responder; los meses futuros no se guardan.
    """
    year = year or today.year
    month = month or today.month

    try:
        result = build_monthly_health_score(session, year, month, first_day=get_first_day_of_month(session))
    except ValueError as exc:
        # Ej: diciembre de 9999, el periodo termina en un año que datetime no soporta
        raise HTTPException(status_code=400, detail=f"Periodo inválido: {exc}")

    if not is_future_month(year, month, today) and writer.request_write(year, month, result.total_score):
        background_tasks.add_task(writer.save, session.get_bind(), year, month, result)

    return result


@router.get("/trend", response_model=List[TrendPoint])
def get_health_score_trend(
    year: Optional[int] = Query(None, ge=1970, le=9999),
    session: Session = Depends(get_session),
    today: date = Depends(get_today),
):
    year = year or today.year
    snapshots = session.exec(
        select(HealthScoreSnapshot).where(HealthScoreSnapshot.year == year)
    ).all()
    return project_trend(year, {s.month: s.total_score for s in snapshots}, today)


@router.get("/history", response_model=List[HealthScoreSnapshotRead])
def list_health_score_history(session: Session = Depends(get_session)):
    snapshots = session.exec(
        select(HealthScoreSnapshot).order_by(
            HealthScoreSnapshot.year.desc(), HealthScoreSnapshot.month.desc()
        )
    ).all()
    return [to_snapshot_read(s) for s in snapshots]
