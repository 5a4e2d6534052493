from __future__ import annotations

from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import MAX_ID, MIN_ID

# riferimento a una riga: stesso range delle colonne INTEGER
RowId = Annotated[int, Field(ge=MIN_ID, le=MAX_ID)]


class WireModel(BaseModel):
    # JSON in camelCase (fullName, cabinetId, ...), input accettato anche in snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)



# Medici

class DoctorListOut(WireModel):
    id: int
    full_name: str
    cabinet_number: str
    specialization_name: str
    estate_number: str


class DoctorEdit(WireModel):
    full_name: str = Field(..., min_length=1)
    cabinet_id: RowId
    specialization_id: RowId
    estate_id: RowId | None = None


class DoctorOut(WireModel):
    id: int
    full_name: str
    cabinet_id: int
    specialization_id: int
    estate_id: int | None = None



# Pazienti

class PatientListOut(WireModel):
    id: int
    full_name: str
    address: str | None = None
    date_of_birth: date
    gender: str
    estate_number: str


class PatientEdit(WireModel):
    # ignorato in creazione, deve coincidere con l'id del path in modifica
    id: RowId | None = None
    last_name: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    middle_name: str | None = None
    address: str | None = None
    date_of_birth: date
    gender: str = Field(..., min_length=1)
    estate_id: RowId
