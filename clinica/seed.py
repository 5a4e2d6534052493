from __future__ import annotations

from sqlalchemy import select

from .db import db_session
from .models import Cabinet, Estate, Specialization

CABINETS = ["101", "102", "201"]
SPECIALIZATIONS = ["Therapist", "Cardiologist", "Surgeon", "Pediatrician"]
ESTATES = ["1", "2", "3"]


def seed_base() -> None:
    """
    Popola i dati di riferimento (idempotente):
    - studi
    - specializzazioni
    - distretti
    """
    with db_session() as s:
        for number in CABINETS:
            if s.execute(select(Cabinet).where(Cabinet.number == number)).scalar_one_or_none() is None:
                s.add(Cabinet(number=number))

        for name in SPECIALIZATIONS:
            if s.execute(select(Specialization).where(Specialization.name == name)).scalar_one_or_none() is None:
                s.add(Specialization(name=name))

        for number in ESTATES:
            if s.execute(select(Estate).where(Estate.number == number)).scalar_one_or_none() is None:
                s.add(Estate(number=number))
