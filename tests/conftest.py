"""Shared fixtures: in-memory SQLite wired into the FastAPI app."""
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from clinica.api_main import app
from clinica.db import Base
from clinica.models import Cabinet, Doctor, Estate, Patient, Specialization
from clinica.store import ClinicStore, get_store


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def store(session_factory):
    session = session_factory()
    yield ClinicStore(session)
    session.close()


@pytest.fixture
def reference_data(session_factory):
    """Cabinets 1-3, specializations 1-3 and estates 1-2."""
    with session_factory() as s:
        s.add_all([Cabinet(number=n) for n in ("101", "102", "201")])
        s.add_all([Specialization(name=n) for n in ("Therapist", "Cardiologist", "Surgeon")])
        s.add_all([Estate(number=n) for n in ("1", "2")])
        s.commit()


@pytest.fixture
def add_rows(session_factory):
    """Insert ORM rows in their own committed session and return their ids."""
    def _add(*rows):
        with session_factory() as s:
            s.add_all(rows)
            s.commit()
            return [r.id for r in rows]
    return _add


@pytest.fixture
def make_patient():
    def _make(last_name="Rossi", first_name="Mario", middle_name=None, dob=date(1980, 1, 1), estate_id=1, **kw):
        return Patient(
            last_name=last_name,
            first_name=first_name,
            middle_name=middle_name,
            address=kw.get("address", "Via Roma 1"),
            date_of_birth=dob,
            gender=kw.get("gender", "M"),
            estate_id=estate_id,
        )
    return _make


@pytest.fixture
def client(session_factory):
    def _override_store():
        session = session_factory()
        try:
            yield ClinicStore(session)
        finally:
            session.close()

    app.dependency_overrides[get_store] = _override_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_doctor():
    def _make(full_name, cabinet_id=1, specialization_id=1, estate_id=None):
        return Doctor(
            full_name=full_name,
            cabinet_id=cabinet_id,
            specialization_id=specialization_id,
            estate_id=estate_id,
        )
    return _make
