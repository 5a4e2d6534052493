from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# DB SQLite su file nella root del progetto, salvo override da ambiente
DEFAULT_DB_PATH = Path(__file__).resolve().parents[1] / "clinica.sqlite"

DATABASE_URL = os.getenv("CLINICA_DATABASE_URL", f"sqlite:///{DEFAULT_DB_PATH}")
SQL_ECHO = os.getenv("CLINICA_SQL_ECHO", "0") == "1"
LOG_LEVEL = os.getenv("CLINICA_LOG_LEVEL", "INFO").upper()
SEED_ON_STARTUP = os.getenv("CLINICA_SEED_ON_STARTUP", "1") == "1"
