from sqlmodel import SQLModel

import budget_planner.models  # noqa: F401 registra las tablas en la metadata
from budget_planner.database import engine

SQLModel.metadata.drop_all(engine)
SQLModel.metadata.create_all(engine)

print("✅ Base de datos reseteada correctamente (tablas recreadas vacías).")
