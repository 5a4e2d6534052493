"""
Conversioni esplicite entità <-> DTO.

Funzioni pure: nessun accesso al DB. Le relazioni usate dalle viste
"lista" devono essere già caricate (eager load) dal chiamante.
"""
from __future__ import annotations

from .models import Doctor, Patient
from .schemas import DoctorEdit, DoctorListOut, DoctorOut, PatientEdit, PatientListOut


# =========================
# Medici
# =========================
def doctor_to_list(doctor: Doctor) -> DoctorListOut:
    return DoctorListOut(
        id=doctor.id,
        full_name=doctor.full_name,
        cabinet_number=doctor.cabinet.number,
        specialization_name=doctor.specialization.name,
        estate_number=doctor.estate.number if doctor.estate is not None else "",
    )


def doctor_to_edit(doctor: Doctor) -> DoctorEdit:
    return DoctorEdit(
        full_name=doctor.full_name,
        cabinet_id=doctor.cabinet_id,
        specialization_id=doctor.specialization_id,
        estate_id=doctor.estate_id,
    )


def doctor_to_out(doctor: Doctor) -> DoctorOut:
    return DoctorOut(
        id=doctor.id,
        full_name=doctor.full_name,
        cabinet_id=doctor.cabinet_id,
        specialization_id=doctor.specialization_id,
        estate_id=doctor.estate_id,
    )


def doctor_from_edit(edit: DoctorEdit) -> Doctor:
    """Nuovo medico; l'id viene assegnato dal DB al commit."""
    return apply_doctor_edit(edit, Doctor())


def apply_doctor_edit(edit: DoctorEdit, doctor: Doctor) -> Doctor:
    """Sovrascrive sul posto tutti i campi mappati. L'id non viene mai toccato."""
    doctor.full_name = edit.full_name
    doctor.cabinet_id = edit.cabinet_id
    doctor.specialization_id = edit.specialization_id
    doctor.estate_id = edit.estate_id
    return doctor


# =========================
# Pazienti
# =========================
def patient_full_name(patient: Patient) -> str:
    parts = (patient.last_name, patient.first_name, patient.middle_name)
    return " ".join(p for p in parts if p)


def patient_to_list(patient: Patient) -> PatientListOut:
    return PatientListOut(
        id=patient.id,
        full_name=patient_full_name(patient),
        address=patient.address,
        date_of_birth=patient.date_of_birth,
        gender=patient.gender,
        estate_number=patient.estate.number if patient.estate is not None else "",
    )


def patient_to_edit(patient: Patient) -> PatientEdit:
    return PatientEdit(
        id=patient.id,
        last_name=patient.last_name,
        first_name=patient.first_name,
        middle_name=patient.middle_name,
        address=patient.address,
        date_of_birth=patient.date_of_birth,
        gender=patient.gender,
        estate_id=patient.estate_id,
    )


def patient_from_edit(edit: PatientEdit) -> Patient:
    return apply_patient_edit(edit, Patient())


def apply_patient_edit(edit: PatientEdit, patient: Patient) -> Patient:
    patient.last_name = edit.last_name
    patient.first_name = edit.first_name
    patient.middle_name = edit.middle_name
    patient.address = edit.address
    patient.date_of_birth = edit.date_of_birth
    patient.gender = edit.gender
    patient.estate_id = edit.estate_id
    return patient
