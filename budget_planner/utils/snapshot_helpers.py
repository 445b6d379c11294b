# budget_planner/utils/snapshot_helpers.py

import logging
import threading
from collections import defaultdict
from datetime import datetime
from typing import Dict, Optional, Tuple

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from budget_planner.models.health_score import HealthScoreSnapshot
from budget_planner.schemas.health_score import ComponentScoresRead, HealthScoreResult, HealthScoreSnapshotRead

logger = logging.getLogger(__name__)


def upsert_snapshot(session: Session, year: int, month: int, result: HealthScoreResult) -> HealthScoreSnapshot:
    """
    Inserta o actualiza la fila de (year, month). La búsqueda y la escritura quedan
    en la misma transacción; created_at se conserva al actualizar.
    """
    components = result.components
    values = dict(
        total_score=result.total_score,
        savings_rate=components.savings_rate.score,
        budget_adherence=components.budget_adherence.score,
        debt_progress=components.debt_progress.score,
        spending_stability=components.spending_stability.score,
        emergency_fund=components.emergency_fund.score,
    )

    snapshot = session.exec(
        select(HealthScoreSnapshot).where(
            HealthScoreSnapshot.year == year,
            HealthScoreSnapshot.month == month,
        )
    ).first()

    if snapshot:
        for field, value in values.items():
            setattr(snapshot, field, value)
        snapshot.updated_at = datetime.utcnow()
    else:
        snapshot = HealthScoreSnapshot(year=year, month=month, **values)

    session.add(snapshot)
    session.commit()
    session.refresh(snapshot)
    return snapshot


def to_snapshot_read(snapshot: HealthScoreSnapshot) -> HealthScoreSnapshotRead:
    return HealthScoreSnapshotRead(
        id=snapshot.id,
        year=snapshot.year,
        month=snapshot.month,
        total_score=snapshot.total_score,
        component_scores=ComponentScoresRead(
            savings_rate=snapshot.savings_rate,
            budget_adherence=snapshot.budget_adherence,
            debt_progress=snapshot.debt_progress,
            spending_stability=snapshot.spending_stability,
            emergency_fund=snapshot.emergency_fund,
        ),
        created_at=snapshot.created_at,
        updated_at=snapshot.updated_at,
    )


class SnapshotWriter:
    """
    Persiste los puntajes mensuales fuera de la lectura (como tarea en segundo plano).

    Serializa las escrituras por (year, month), recuerda el último total guardado
    de cada mes para no reescribir si el puntaje no cambió, y descarta escrituras
    agendadas que ya no corresponden al último total pedido.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[Tuple[int, int], threading.Lock] = defaultdict(threading.Lock)
        self._last_saved: Dict[Tuple[int, int], int] = {}
        self._last_requested: Dict[Tuple[int, int], int] = {}

    def _lock_for(self, key: Tuple[int, int]) -> threading.Lock:
        with self._guard:
            return self._locks[key]

    def request_write(self, year: int, month: int, total_score: int) -> bool:
        """Registra el total más reciente del mes; True si hay que agendar la escritura."""
        key = (year, month)
        with self._guard:
            self._last_requested[key] = total_score
            return self._last_saved.get(key) != total_score

    def save(self, engine: Engine, year: int, month: int, result: HealthScoreResult) -> Optional[HealthScoreSnapshot]:
        """Nunca lanza: si falla se registra el error y se reintenta en el próximo cálculo."""
        key = (year, month)
        with self._lock_for(key):
            with self._guard:
                latest = self._last_requested.get(key, result.total_score)
            if latest != result.total_score:
                # Un cálculo posterior ya pidió otro total; esta escritura quedó vieja
                logger.debug(
                    "Se descarta el puntaje %s de %04d-%02d (último pedido: %s)",
                    result.total_score, year, month, latest,
                )
                return None

            with Session(engine) as session:
                try:
                    snapshot = upsert_snapshot(session, year, month, result)
                except SQLAlchemyError:
                    session.rollback()
                    logger.exception("No se pudo guardar el puntaje de salud de %04d-%02d", year, month)
                    return None

            with self._guard:
                self._last_saved[key] = result.total_score
            logger.info("Puntaje de salud %04d-%02d guardado: %s", year, month, result.total_score)
            return snapshot
