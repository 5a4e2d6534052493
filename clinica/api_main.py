from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from clinica.config import SEED_ON_STARTUP
from clinica.db import init_db
from clinica.logging_config import configure_logging
from clinica.routers.doctors import router as doctors_router
from clinica.routers.patients import router as patients_router
from clinica.seed import seed_base

configure_logging()
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Crea tabelle e dati di riferimento (idempotente)
    if SEED_ON_STARTUP:
        init_db()
        seed_base()
        log.info("Database initialized and reference data seeded")
    yield
    log.info("Shutting down API server...")


app = FastAPI(title="Clinica API", version="1.0.0", lifespan=lifespan)
app.include_router(doctors_router)
app.include_router(patients_router)


@app.get("/health")
def health() -> dict[str, Any]:
    return {"ok": True}
