import os
from dotenv import load_dotenv

load_dotenv()  # Carga las variables de entorno

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./budget_planner.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if origin.strip()
]

# Día en que empieza el "mes financiero" cuando aún no existe fila de ajustes
DEFAULT_FIRST_DAY_OF_MONTH = int(os.getenv("DEFAULT_FIRST_DAY_OF_MONTH", "1"))
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "USD")
