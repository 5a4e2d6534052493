from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Sequence, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from .db import SessionLocal
from .errors import PersistenceError
from .models import MAX_ID, MIN_ID, Cabinet, Doctor, Estate, Patient, Specialization

M = TypeVar("M")


@dataclass(frozen=True)
class SortKey:
    columns: tuple[Any, ...]
    # relazioni da unire in JOIN per poter ordinare su colonne di altre tabelle
    joins: tuple[Any, ...] = ()


DOCTOR_SORTS = {
    "FullName": SortKey((Doctor.full_name,)),
    "SpecializationName": SortKey((Specialization.name,), joins=(Doctor.specialization,)),
}

PATIENT_SORTS = {
    "LastName": SortKey((Patient.last_name,)),
    "DateOfBirth": SortKey((Patient.date_of_birth,)),
}


class Collection(Generic[M]):
    """
    Accesso tipizzato a una tabella.

    Le chiavi di ordinamento sconosciute ricadono sulla chiave di default
    invece di generare un errore.
    """

    def __init__(self, session: Session, model: type[M], sort_keys: dict[str, SortKey], default_sort: str) -> None:
        self.session = session
        self.model = model
        self.sort_keys = sort_keys
        self.default_sort = default_sort

    def resolve_sort(self, sort_by: str | None) -> SortKey:
        return self.sort_keys.get(sort_by or self.default_sort, self.sort_keys[self.default_sort])

    def _ordered(self, key: SortKey) -> Select:
        q = select(self.model)
        for target in key.joins:
            q = q.join(target)
        # id come spareggio: la paginazione resta deterministica
        return q.order_by(*key.columns, self.model.id)

    def page(self, sort_by: str | None, page: int, page_size: int, eager: Sequence[Any] = ()) -> list[M]:
        """Pagina ``page`` (da 1) di ``page_size`` righe, con le relazioni ``eager`` già caricate."""
        if page < 1 or page_size < 1:
            raise ValueError(f"page and page_size must be >= 1 (got {page}, {page_size})")

        q = self._ordered(self.resolve_sort(sort_by))
        if eager:
            q = q.options(*(joinedload(rel) for rel in eager))
        q = q.offset((page - 1) * page_size).limit(page_size)
        return list(self.session.scalars(q))

    def all(self) -> list[M]:
        return list(self.session.scalars(self._ordered(self.resolve_sort(None))))

    def get(self, ident: int) -> M | None:
        if not MIN_ID <= ident <= MAX_ID:
            return None
        return self.session.get(self.model, ident)

    def exists(self, ident: int) -> bool:
        if not MIN_ID <= ident <= MAX_ID:
            return False
        q = select(self.model.id).where(self.model.id == ident).limit(1)
        return self.session.execute(q).first() is not None

    def add(self, entity: M) -> None:
        self.session.add(entity)

    def remove(self, entity: M) -> None:
        self.session.delete(entity)


class ClinicStore:
    """Handle per richiesta: collezioni tipizzate + commit atomico."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.doctors: Collection[Doctor] = Collection(session, Doctor, DOCTOR_SORTS, "FullName")
        self.patients: Collection[Patient] = Collection(session, Patient, PATIENT_SORTS, "LastName")
        self.cabinets: Collection[Cabinet] = Collection(
            session, Cabinet, {"Number": SortKey((Cabinet.number,))}, "Number"
        )
        self.specializations: Collection[Specialization] = Collection(
            session, Specialization, {"Name": SortKey((Specialization.name,))}, "Name"
        )
        self.estates: Collection[Estate] = Collection(
            session, Estate, {"Number": SortKey((Estate.number,))}, "Number"
        )

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError(str(exc)) from exc

    def refresh(self, entity: Any) -> None:
        self.session.refresh(entity)


def get_store() -> Iterator[ClinicStore]:
    """Dipendenza FastAPI: una sessione per richiesta, chiusa sempre."""
    session = SessionLocal()
    try:
        yield ClinicStore(session)
    finally:
        session.close()
