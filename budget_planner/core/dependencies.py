from datetime import date

from budget_planner.utils.snapshot_helpers import SnapshotWriter

# Una instancia por proceso; los tests la reemplazan con dependency_overrides
snapshot_writer = SnapshotWriter()


def get_today() -> date:
    return date.today()


def get_snapshot_writer() -> SnapshotWriter:
    return snapshot_writer
