from __future__ import annotations

import logging

from .errors import IdentifierMismatch, InvalidReference, NotFound
from .mappers import (
    apply_doctor_edit,
    apply_patient_edit,
    doctor_from_edit,
    doctor_to_edit,
    doctor_to_list,
    doctor_to_out,
    patient_from_edit,
    patient_to_edit,
    patient_to_list,
)
from .models import Doctor, Patient
from .schemas import DoctorEdit, DoctorListOut, DoctorOut, PatientEdit, PatientListOut
from .store import ClinicStore

log = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


# =========================
# Medici
# =========================
def list_doctors(
    store: ClinicStore, sort_by: str = "FullName", page: int = 1, page_size: int = DEFAULT_PAGE_SIZE
) -> list[DoctorListOut]:
    doctors = store.doctors.page(
        sort_by,
        page,
        page_size,
        eager=(Doctor.cabinet, Doctor.specialization, Doctor.estate),
    )
    return [doctor_to_list(d) for d in doctors]


def _load_doctor(store: ClinicStore, doctor_id: int) -> Doctor:
    doctor = store.doctors.get(doctor_id)
    if doctor is None:
        raise NotFound("Doctor", doctor_id)
    return doctor


def get_doctor(store: ClinicStore, doctor_id: int) -> DoctorEdit:
    return doctor_to_edit(_load_doctor(store, doctor_id))


def check_doctor_references(store: ClinicStore, edit: DoctorEdit) -> None:
    """Solleva InvalidReference se studio, specializzazione o distretto (se indicato) non esistono."""
    invalid: dict[str, int] = {}
    if not store.cabinets.exists(edit.cabinet_id):
        invalid["cabinetId"] = edit.cabinet_id
    if not store.specializations.exists(edit.specialization_id):
        invalid["specializationId"] = edit.specialization_id
    if edit.estate_id is not None and not store.estates.exists(edit.estate_id):
        invalid["estateId"] = edit.estate_id
    if invalid:
        raise InvalidReference(invalid)


def create_doctor(store: ClinicStore, edit: DoctorEdit) -> DoctorOut:
    check_doctor_references(store, edit)

    doctor = doctor_from_edit(edit)
    store.doctors.add(doctor)
    store.commit()
    store.refresh(doctor)

    log.info("Doctor %s created", doctor.id, extra={"resource": "doctors"})
    return doctor_to_out(doctor)


def update_doctor(store: ClinicStore, doctor_id: int, edit: DoctorEdit) -> None:
    # nessun controllo id path/body: il DTO dei medici non ha id
    doctor = _load_doctor(store, doctor_id)
    apply_doctor_edit(edit, doctor)
    store.commit()


def delete_doctor(store: ClinicStore, doctor_id: int) -> None:
    doctor = _load_doctor(store, doctor_id)
    store.doctors.remove(doctor)
    store.commit()
    log.info("Doctor %s deleted", doctor_id, extra={"resource": "doctors"})


# =========================
# Pazienti
# =========================
def list_patients(
    store: ClinicStore, sort_by: str = "LastName", page: int = 1, page_size: int = DEFAULT_PAGE_SIZE
) -> list[PatientListOut]:
    patients = store.patients.page(sort_by, page, page_size, eager=(Patient.estate,))
    return [patient_to_list(p) for p in patients]


def _load_patient(store: ClinicStore, patient_id: int) -> Patient:
    patient = store.patients.get(patient_id)
    if patient is None:
        raise NotFound("Patient", patient_id)
    return patient


def get_patient(store: ClinicStore, patient_id: int) -> PatientEdit:
    return patient_to_edit(_load_patient(store, patient_id))


def create_patient(store: ClinicStore, edit: PatientEdit) -> PatientEdit:
    # il distretto non viene verificato qui: un riferimento inesistente
    # fallisce al commit se il DB applica le chiavi esterne
    patient = patient_from_edit(edit)
    store.patients.add(patient)
    store.commit()
    store.refresh(patient)

    log.info("Patient %s created", patient.id, extra={"resource": "patients"})
    return patient_to_edit(patient)


def update_patient(store: ClinicStore, patient_id: int, edit: PatientEdit) -> None:
    if edit.id != patient_id:
        raise IdentifierMismatch(patient_id, edit.id)

    patient = _load_patient(store, patient_id)
    apply_patient_edit(edit, patient)
    store.commit()


def delete_patient(store: ClinicStore, patient_id: int) -> None:
    patient = _load_patient(store, patient_id)
    store.patients.remove(patient)
    store.commit()
    log.info("Patient %s deleted", patient_id, extra={"resource": "patients"})
